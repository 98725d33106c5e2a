"""Configuration helpers for the gap searches."""

from __future__ import annotations

import copy
from dataclasses import dataclass

DEFAULT_BOUND = 4_000_000
DEFAULT_ROW = 2_000_000
TUNING_MULTIPLIER = 4_000_000

STRATEGIES = ("perimeter", "row-scan")


@dataclass
class SearchOptions:
    """Knobs shared by both search strategies."""

    strategy: str = "perimeter"
    # candidates tested per vectorised distance check
    batch_size: int = 4096
    # full normal-form check of every row's interval set
    check_invariants: bool = True
    # log row-scan progress every N rows, 0 disables
    log_every: int = 0

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"unknown strategy {self.strategy!r}, expected one of {', '.join(STRATEGIES)}"
            )
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {self.batch_size}")
        if self.log_every < 0:
            raise ValueError(f"log_every must be non-negative, got {self.log_every}")


_SEARCH_OPTIONS = SearchOptions()


def get_search_options() -> SearchOptions:
    return copy.deepcopy(_SEARCH_OPTIONS)


def set_search_options(options: SearchOptions) -> None:
    global _SEARCH_OPTIONS
    _SEARCH_OPTIONS = copy.deepcopy(options)


__all__ = [
    "DEFAULT_BOUND",
    "DEFAULT_ROW",
    "TUNING_MULTIPLIER",
    "STRATEGIES",
    "SearchOptions",
    "get_search_options",
    "set_search_options",
]
