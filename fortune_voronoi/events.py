"""Site and circle events and the priority queue that orders them."""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .geometry import Point, Triple, circumcenter

logger = logging.getLogger(__name__)

_CIRCLE_KIND = 0
_SITE_KIND = 1


@dataclass(frozen=True)
class SiteEvent:
    site: Point
    face: int

    @property
    def y(self) -> float:
        return self.site.y

    @property
    def x(self) -> float:
        return self.site.x


@dataclass(frozen=True)
class CircleEvent:
    """Predicted disappearance of ``arc``; ``triple`` is a snapshot of its sites."""

    arc: int
    triple: Triple
    center: Point
    radius: float

    @classmethod
    def from_triple(cls, arc: int, triple: Triple, tolerance: float = 1e-12) -> "CircleEvent":
        center = circumcenter(*triple, tolerance=tolerance)
        return cls(arc=arc, triple=triple, center=center, radius=center.distance_to(triple[0]))

    @property
    def y(self) -> float:
        return self.center.y - self.radius

    @property
    def x(self) -> float:
        return self.center.x


Event = Union[SiteEvent, CircleEvent]


@dataclass(order=True)
class _Entry:
    key: Tuple[float, int, float, int]
    event: Event = field(compare=False)


class EventQueue:
    """Max-height-first queue with eager removal of circle events by arc.

    Ties at the same height go to circle events before site events, then to
    the smaller x, then to the earlier insertion.
    """

    def __init__(self) -> None:
        self._heap: List[_Entry] = []
        self._counter = 0

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def push(self, event: Event) -> int:
        event_id = self._counter
        self._counter += 1
        kind = _CIRCLE_KIND if isinstance(event, CircleEvent) else _SITE_KIND
        heapq.heappush(self._heap, _Entry((-event.y, kind, event.x, event_id), event))
        return event_id

    def peek(self) -> Optional[Event]:
        if not self._heap:
            return None
        return self._heap[0].event

    def pop(self) -> Event:
        if not self._heap:
            raise IndexError("pop from an empty event queue")
        return heapq.heappop(self._heap).event

    def circle_events(self) -> List[CircleEvent]:
        return [entry.event for entry in self._heap if isinstance(entry.event, CircleEvent)]

    def remove_circles_with_leaf(self, arc: int) -> int:
        """Drop every pending circle event whose disappearing arc is ``arc``."""

        kept = [
            entry
            for entry in self._heap
            if not (isinstance(entry.event, CircleEvent) and entry.event.arc == arc)
        ]
        removed = len(self._heap) - len(kept)
        if removed:
            heapq.heapify(kept)
            self._heap = kept
            logger.debug("Purged %d circle event(s) for arc %d", removed, arc)
        return removed


__all__ = ["SiteEvent", "CircleEvent", "Event", "EventQueue"]
