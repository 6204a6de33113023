"""Defaults shared by the library entry points and the CLI.

EPIDEMICTOOLS_ALGORITHM overrides the default solver; command line flags
override both.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_RATE = 0.10
DEFAULT_TARGET = 0.70
DEFAULT_TOLERANCE = 0.00005
DEFAULT_REPORT_EVERY = 1000


def default_algorithm() -> str:
    return os.environ.get("EPIDEMICTOOLS_ALGORITHM", "dp")


@dataclass(frozen=True)
class SpreadOptions:
    days: int
    rate: float = DEFAULT_RATE
    algorithm: str = field(default_factory=default_algorithm)

    def __post_init__(self) -> None:
        if self.days < 0:
            raise ValueError(f"days must be non-negative, got {self.days}")
        if not 0.0 <= self.rate <= 1.0:
            raise ValueError(f"rate must be in [0, 1], got {self.rate}")


@dataclass(frozen=True)
class SearchOptions:
    spread: SpreadOptions
    target: float = DEFAULT_TARGET
    tolerance: float = DEFAULT_TOLERANCE
    report_every: int = DEFAULT_REPORT_EVERY
