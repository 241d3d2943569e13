"""Expiration payoff of option legs.

Every payoff number in the package comes from these two functions; the
metrics sampler and the chart builder both call :func:`strategy_payoff`.
"""

from typing import Iterable

from .types import Leg

__all__ = ["intrinsic_value", "payoff_at", "strategy_payoff"]


def intrinsic_value(leg: Leg, price: float) -> float:
    """Value of the option at expiration when the underlying settles at *price*."""
    if leg.is_call:
        return max(0.0, price - leg.strike)
    return max(0.0, leg.strike - price)


def payoff_at(leg: Leg, price: float) -> float:
    """P/L of one leg at expiration.

    long payoff = intrinsic - premium; a sold leg is the mirror image.
    Scaled by contracts.
    """
    payoff = intrinsic_value(leg, price) - leg.premium
    if leg.is_sell:
        payoff = -payoff
    return payoff * leg.contracts


def strategy_payoff(legs: Iterable[Leg], price: float) -> float:
    """Total P/L of all legs at *price*."""
    return sum((payoff_at(leg, price) for leg in legs), 0.0)
