"""Configuration helpers for the sweep."""

from __future__ import annotations

import copy
from dataclasses import dataclass

DUPLICATE_POLICIES = ("merge", "error")


@dataclass
class SweepOptions:
    """Options controlling degenerate-input policy and self-checks."""

    duplicates: str = "merge"
    collinear_tolerance: float = 1e-12
    order_tolerance: float = 1e-9
    check_invariants: bool = False

    def __post_init__(self) -> None:
        if self.duplicates not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicates must be one of {', '.join(DUPLICATE_POLICIES)} (got {self.duplicates!r})"
            )
        if self.collinear_tolerance < 0 or self.order_tolerance < 0:
            raise ValueError("tolerances must be non-negative")


_SWEEP_OPTIONS = SweepOptions()


def get_sweep_options() -> SweepOptions:
    return copy.deepcopy(_SWEEP_OPTIONS)


def set_sweep_options(options: SweepOptions) -> None:
    global _SWEEP_OPTIONS
    _SWEEP_OPTIONS = copy.deepcopy(options)
