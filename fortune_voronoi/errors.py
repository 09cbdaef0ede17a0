"""Exception types raised by the sweep and its collaborators."""

from __future__ import annotations

from typing import Dict, Optional, Sequence


class InvariantViolation(RuntimeError):
    """Raised when the beachline or mesh bookkeeping is internally inconsistent.

    These indicate a bug in the construction itself and are never recovered.
    """

    def __init__(self, invariant: str, message: str, handles: Optional[Dict[str, object]] = None):
        self.invariant = invariant
        self.handles = dict(handles or {})
        detail = ", ".join(f"{key}={value}" for key, value in self.handles.items())
        text = f"[{invariant}] {message}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class DegenerateInputError(ValueError):
    """Base class for input the sweep refuses by policy."""


class CollinearSitesError(DegenerateInputError):
    """Raised when a circumcircle is requested for (nearly) collinear points."""

    def __init__(self, points: Sequence[object]):
        super().__init__(f"points are collinear, circumcircle undefined: {list(points)!r}")
        self.points = tuple(points)


class InvalidSiteError(DegenerateInputError):
    """Raised for sites with non-finite coordinates or a malformed shape."""


class DuplicateSiteError(DegenerateInputError):
    """Raised for coincident sites when duplicates are not merged."""

    def __init__(self, site: object, first: int, duplicate: int):
        super().__init__(f"site {site!r} at index {duplicate} duplicates index {first}")
        self.site = site
        self.first = first
        self.duplicate = duplicate


__all__ = [
    "InvariantViolation",
    "DegenerateInputError",
    "CollinearSitesError",
    "InvalidSiteError",
    "DuplicateSiteError",
]
