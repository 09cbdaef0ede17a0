"""Beachline: an index-based binary tree of arcs (leaves) and breakpoints.

An in-order walk of the leaves gives the arcs from left to right at the
current sweep height. Breakpoint positions are not stored; they are recomputed
from the two adjacent sites whenever a search needs them. The tree is not
rebalanced, so search and navigation are linear in the number of arcs in the
worst case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from .dcel import NIL
from .errors import InvariantViolation
from .geometry import Point, Triple, breakpoint_x

logger = logging.getLogger(__name__)


@dataclass
class Arc:
    site: Point
    face: int
    circle_event: Optional[int] = None


@dataclass
class Breakpoint:
    left_site: Point
    right_site: Point
    halfedge: int = NIL

    def x_at(self, sweep_y: float) -> float:
        return breakpoint_x(self.left_site, self.right_site, sweep_y)


@dataclass
class BeachNode:
    item: Union[Arc, Breakpoint]
    parent: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.item, Arc)


class Beachline:
    """Arena-backed tree of beachline nodes.

    Slots of removed nodes are retired (set to ``None``) and never reused.
    """

    def __init__(self) -> None:
        self.nodes: List[Optional[BeachNode]] = []
        self.root: Optional[int] = None

    def is_empty(self) -> bool:
        return self.root is None

    # -- arena access -------------------------------------------------

    def node(self, index: int) -> BeachNode:
        if not 0 <= index < len(self.nodes) or self.nodes[index] is None:
            raise InvariantViolation("live-node", "beachline node is retired or unknown", {"node": index})
        return self.nodes[index]  # type: ignore[return-value]

    def is_live(self, index: int) -> bool:
        return 0 <= index < len(self.nodes) and self.nodes[index] is not None

    def arc(self, index: int) -> Arc:
        item = self.node(index).item
        if not isinstance(item, Arc):
            raise InvariantViolation("arc-leaf", "expected an arc leaf", {"node": index})
        return item

    def breakpoint(self, index: int) -> Breakpoint:
        item = self.node(index).item
        if not isinstance(item, Breakpoint):
            raise InvariantViolation("breakpoint-internal", "expected a breakpoint node", {"node": index})
        return item

    def _new(self, node: BeachNode) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def _retire(self, index: int) -> None:
        self.nodes[index] = None

    def _replace_child(self, parent: Optional[int], old: int, new: int) -> None:
        if parent is None:
            self.root = new
            self.node(new).parent = None
            return
        parent_node = self.node(parent)
        if parent_node.left == old:
            parent_node.left = new
        elif parent_node.right == old:
            parent_node.right = new
        else:
            raise InvariantViolation(
                "child-link", "parent does not acknowledge child", {"parent": parent, "child": old}
            )
        self.node(new).parent = parent

    # -- construction -------------------------------------------------

    def insert_first(self, site: Point, face: int) -> int:
        if not self.is_empty():
            raise InvariantViolation("empty-insert", "insert_first on a non-empty beachline", {"root": self.root})
        self.root = self._new(BeachNode(Arc(site, face)))
        return self.root

    def split_arc(self, arc: int, site: Point, face: int, left_edge: int, right_edge: int) -> int:
        """Replace leaf ``arc`` by ``[old, new, old]`` and return the new arc's node.

        ``left_edge`` is stored on the breakpoint ``(old, new)`` and
        ``right_edge`` on ``(new, old)``.
        """

        old = self.arc(arc)
        parent = self.node(arc).parent

        left_bp = self._new(BeachNode(Breakpoint(old.site, site, left_edge)))
        right_bp = self._new(BeachNode(Breakpoint(site, old.site, right_edge), parent=left_bp))
        left_copy = self._new(BeachNode(Arc(old.site, old.face), parent=left_bp))
        middle = self._new(BeachNode(Arc(site, face), parent=right_bp))
        right_copy = self._new(BeachNode(Arc(old.site, old.face), parent=right_bp))

        self.node(left_bp).left = left_copy
        self.node(left_bp).right = right_bp
        self.node(right_bp).left = middle
        self.node(right_bp).right = right_copy

        self._replace_child(parent, arc, left_bp)
        self._retire(arc)
        return middle

    def split_level(self, arc: int, site: Point, face: int, edge: int) -> int:
        """Split leaf ``arc`` in two for a site at the same height as its own.

        The new arc goes on the side given by x order. ``edge`` is stored on
        the single new breakpoint. Returns the new arc's node.
        """

        old = self.arc(arc)
        parent = self.node(arc).parent
        if site.x >= old.site.x:
            bp = self._new(BeachNode(Breakpoint(old.site, site, edge)))
            kept = self._new(BeachNode(Arc(old.site, old.face), parent=bp))
            fresh = self._new(BeachNode(Arc(site, face), parent=bp))
            self.node(bp).left, self.node(bp).right = kept, fresh
        else:
            bp = self._new(BeachNode(Breakpoint(site, old.site, edge)))
            fresh = self._new(BeachNode(Arc(site, face), parent=bp))
            kept = self._new(BeachNode(Arc(old.site, old.face), parent=bp))
            self.node(bp).left, self.node(bp).right = fresh, kept

        self._replace_child(parent, arc, bp)
        self._retire(arc)
        return fresh

    def delete_leaf(self, leaf: int) -> Tuple[int, int, int, int]:
        """Remove ``leaf`` and splice its sibling into its parent's place.

        Returns ``(predecessor, successor, parent, other)`` where ``other`` is
        whichever of the neighbouring breakpoints survives; its sites are
        updated to the arcs that become adjacent. ``parent`` is retired.
        """

        self.arc(leaf)
        pred = self.predecessor(leaf)
        succ = self.successor(leaf)
        parent = self.node(leaf).parent
        if pred is None or succ is None or parent is None:
            raise InvariantViolation(
                "inner-arc",
                "only an arc with neighbours on both sides can disappear",
                {"leaf": leaf, "predecessor": pred, "successor": succ},
            )
        grandparent = self.node(parent).parent
        if grandparent is None:
            raise InvariantViolation("grandparent", "leaf parent has no parent", {"leaf": leaf, "parent": parent})

        if parent == pred:
            other = succ
        elif parent == succ:
            other = pred
        else:
            raise InvariantViolation(
                "parent-neighbour",
                "leaf parent is neither predecessor nor successor",
                {"leaf": leaf, "parent": parent, "predecessor": pred, "successor": succ},
            )

        parent_node = self.node(parent)
        if parent_node.right == leaf:
            sibling = parent_node.left
        elif parent_node.left == leaf:
            sibling = parent_node.right
        else:
            raise InvariantViolation("child-link", "parent does not acknowledge leaf", {"leaf": leaf, "parent": parent})
        if sibling is None:
            raise InvariantViolation("full-internal", "breakpoint lacks a child", {"node": parent})

        self._replace_child(grandparent, parent, sibling)
        self._retire(leaf)
        self._retire(parent)

        survivor = self.breakpoint(other)
        if other == pred:
            new_right = self.successor(other)
            if new_right is None:
                raise InvariantViolation("neighbour", "breakpoint without successor", {"node": other})
            survivor.right_site = self.arc(new_right).site
        else:
            new_left = self.predecessor(other)
            if new_left is None:
                raise InvariantViolation("neighbour", "breakpoint without predecessor", {"node": other})
            survivor.left_site = self.arc(new_left).site
        return pred, succ, parent, other

    # -- search and navigation ---------------------------------------

    def locate_arc_above(self, point: Point) -> int:
        """Return the leaf whose arc lies directly above ``point``."""

        if self.root is None:
            raise InvariantViolation("non-empty", "locate_arc_above on an empty beachline")
        current = self.root
        while True:
            node = self.node(current)
            if node.is_leaf:
                return current
            if node.left is None or node.right is None:
                raise InvariantViolation("full-internal", "breakpoint lacks a child", {"node": current})
            if point.x < self.breakpoint(current).x_at(point.y):
                current = node.left
            else:
                current = node.right

    def _minimum(self, index: int) -> int:
        while self.node(index).left is not None:
            index = self.node(index).left  # type: ignore[assignment]
        return index

    def _maximum(self, index: int) -> int:
        while self.node(index).right is not None:
            index = self.node(index).right  # type: ignore[assignment]
        return index

    def successor(self, index: int) -> Optional[int]:
        node = self.node(index)
        if node.right is not None:
            return self._minimum(node.right)
        current = index
        parent = node.parent
        while parent is not None and self.node(parent).right == current:
            current = parent
            parent = self.node(parent).parent
        return parent

    def predecessor(self, index: int) -> Optional[int]:
        node = self.node(index)
        if node.left is not None:
            return self._maximum(node.left)
        current = index
        parent = node.parent
        while parent is not None and self.node(parent).left == current:
            current = parent
            parent = self.node(parent).parent
        return parent

    def left_arc(self, index: Optional[int]) -> Optional[int]:
        if index is None:
            return None
        between = self.predecessor(index)
        if between is None:
            return None
        return self.predecessor(between)

    def right_arc(self, index: Optional[int]) -> Optional[int]:
        if index is None:
            return None
        between = self.successor(index)
        if between is None:
            return None
        return self.successor(between)

    def leftward_triple(self, index: int) -> Optional[Triple]:
        left = self.left_arc(index)
        left_left = self.left_arc(left)
        if left is None or left_left is None:
            return None
        return (self.arc(left_left).site, self.arc(left).site, self.arc(index).site)

    def rightward_triple(self, index: int) -> Optional[Triple]:
        right = self.right_arc(index)
        right_right = self.right_arc(right)
        if right is None or right_right is None:
            return None
        return (self.arc(index).site, self.arc(right).site, self.arc(right_right).site)

    # -- traversal and self-checks -------------------------------------

    def in_order(self) -> Iterator[int]:
        stack: List[int] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = self.node(current).left
            current = stack.pop()
            yield current
            current = self.node(current).right

    def arcs(self) -> List[int]:
        return [index for index in self.in_order() if self.node(index).is_leaf]

    def sites(self) -> List[Point]:
        return [self.arc(index).site for index in self.arcs()]

    def breakpoint_positions(self, sweep_y: float) -> List[float]:
        return [
            self.breakpoint(index).x_at(sweep_y) for index in self.in_order() if not self.node(index).is_leaf
        ]

    def check_structure(self) -> None:
        """Verify parent/child links and that leaves and breakpoints alternate."""

        if self.root is None:
            return
        if self.node(self.root).parent is not None:
            raise InvariantViolation("root-parent", "root has a parent", {"root": self.root})
        previous: Optional[BeachNode] = None
        for index in self.in_order():
            node = self.node(index)
            if node.is_leaf:
                if node.left is not None or node.right is not None:
                    raise InvariantViolation("leaf-children", "arc leaf has children", {"node": index})
            elif node.left is None or node.right is None:
                raise InvariantViolation("full-internal", "breakpoint lacks a child", {"node": index})
            for child in (node.left, node.right):
                if child is not None and self.node(child).parent != index:
                    raise InvariantViolation(
                        "parent-link", "child does not point back to parent", {"node": index, "child": child}
                    )
            if previous is not None:
                if previous.is_leaf == node.is_leaf:
                    raise InvariantViolation(
                        "alternation", "arcs and breakpoints do not alternate", {"node": index}
                    )
                if isinstance(node.item, Breakpoint) and isinstance(previous.item, Arc):
                    if node.item.left_site != previous.item.site:
                        raise InvariantViolation(
                            "breakpoint-sites", "left site does not match left arc", {"node": index}
                        )
                if isinstance(node.item, Arc) and isinstance(previous.item, Breakpoint):
                    if previous.item.right_site != node.item.site:
                        raise InvariantViolation(
                            "breakpoint-sites", "right site does not match right arc", {"node": index}
                        )
            previous = node

    def check_order(self, sweep_y: float, tolerance: float = 1e-9) -> None:
        """Verify that breakpoint abscissae are non-decreasing at ``sweep_y``."""

        positions = self.breakpoint_positions(sweep_y)
        for left, right in zip(positions, positions[1:]):
            if right < left - tolerance * max(1.0, abs(left)):
                raise InvariantViolation(
                    "tree-order",
                    "breakpoints out of order",
                    {"sweep_y": sweep_y, "left_x": left, "right_x": right},
                )


__all__ = ["Arc", "Breakpoint", "BeachNode", "Beachline"]
