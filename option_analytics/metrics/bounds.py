"""Profit/loss bounds: a finite amount or no ceiling at all."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Bounded:
    value: float

    @property
    def is_unbounded(self) -> bool:
        return False

    def display(self) -> str:
        return f"{self.value:.2f}"


@dataclass(frozen=True)
class Unbounded:

    @property
    def is_unbounded(self) -> bool:
        return True

    def display(self) -> str:
        return "Unlimited"


UNBOUNDED = Unbounded()

Bound = Union[Bounded, Unbounded]


class Estimate(Enum):
    """Marker for figures the engine deliberately does not estimate."""
    NOT_COMPUTED = "N/A"


NOT_COMPUTED = Estimate.NOT_COMPUTED


def bound_value(bound: Bound) -> Optional[float]:
    """The finite value, or None for an unbounded side."""
    if isinstance(bound, Bounded):
        return bound.value
    return None


def bound_to_json(bound: Bound) -> Union[float, str]:
    if isinstance(bound, Bounded):
        return bound.value
    return bound.display()
