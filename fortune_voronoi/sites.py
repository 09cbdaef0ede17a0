"""Input handling: coercion, validation, duplicate policy and site sources."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from .errors import DuplicateSiteError, InvalidSiteError
from .geometry import Point

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[\s,;]+")


def as_points(data: Iterable[object]) -> List[Point]:
    """Return ``data`` as a list of :class:`Point`.

    Accepts Points, ``(x, y)`` pairs or anything numpy reads as an ``(n, 2)``
    array.
    """

    if isinstance(data, np.ndarray):
        items: List[object] = list(data) if data.size else []
    else:
        items = list(data)
    if not items:
        return []
    if all(isinstance(item, Point) for item in items):
        return list(items)  # type: ignore[arg-type]
    try:
        array = np.asarray([tuple(item) for item in items], dtype=float)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidSiteError(f"sites must be (x, y) pairs: {exc}") from exc
    if array.ndim != 2 or array.shape[1] != 2:
        raise InvalidSiteError(f"sites must form an (n, 2) array, got shape {array.shape}")
    return [Point(float(x), float(y)) for x, y in array]


def prepare_sites(data: Iterable[object], duplicates: str = "merge") -> List[Point]:
    """Validate sites and apply the duplicate policy (``"merge"`` or ``"error"``)."""

    points = as_points(data)
    bad = [idx for idx, point in enumerate(points) if not point.is_finite()]
    if bad:
        raise InvalidSiteError(f"sites must have finite coordinates (bad indices: {bad[:10]})")

    seen: Dict[Point, int] = {}
    unique: List[Point] = []
    for idx, point in enumerate(points):
        first = seen.get(point)
        if first is not None:
            if duplicates == "error":
                raise DuplicateSiteError(point, first, idx)
            continue
        seen[point] = idx
        unique.append(point)

    merged = len(points) - len(unique)
    if merged:
        logger.warning("Merged %d duplicate site(s)", merged)
    return unique


def random_sites(
    count: int,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    width: float = 1.0,
    height: float = 1.0,
) -> List[Point]:
    """Sample ``count`` sites uniformly from ``[0, width) x [0, height)``."""

    if count < 0:
        raise ValueError("count must be non-negative")
    generator = rng if rng is not None else np.random.default_rng(seed)
    samples = generator.random((count, 2)) * np.array([width, height], dtype=float)
    return [Point(float(x), float(y)) for x, y in samples]


def load_sites(path: Union[str, Path]) -> List[Point]:
    """Read one ``x y`` (or ``x,y``) pair per line; ``#`` starts a comment."""

    points: List[Point] = []
    text = Path(path).read_text(encoding="utf-8")
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = [part for part in _SEPARATOR_RE.split(line) if part]
        if len(fields) != 2:
            raise ValueError(f"[line {line_no}] expected two coordinates, got {len(fields)}")
        try:
            x, y = (float(value) for value in fields)
        except ValueError as exc:
            raise ValueError(f"[line {line_no}] invalid coordinate: {exc}") from exc
        points.append(Point(x, y))
    logger.info("Loaded %d site(s) from %s", len(points), path)
    return points


__all__ = ["as_points", "prepare_sites", "random_sites", "load_sites"]
