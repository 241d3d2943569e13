"""
Shared pytest fixtures and leg factory helpers for option-analytics tests.

Everything under test is pure; no database, network or files beyond tmp_path.
"""

import pytest

from option_analytics.config import EngineSettings
from option_analytics.strategy_engine import Action, Leg, OptionType


# ---------------------------------------------------------------------------
# Leg factory helpers
# ---------------------------------------------------------------------------

def make_leg(action, option_type, strike, premium=0.0, contracts=1):
    """Shorthand: make_leg("Buy", "Call", 100, 5)."""
    return Leg(
        action=Action(action),
        option_type=OptionType(option_type),
        strike=float(strike),
        premium=float(premium),
        contracts=contracts,
    )


def raw_leg(action, option_type, strike, premium, contracts=1):
    """Leg as a form would submit it: strings everywhere."""
    return {
        "action": action,
        "type": option_type,
        "strike": str(strike),
        "premium": str(premium),
        "contracts": contracts,
    }


# ---------------------------------------------------------------------------
# Core fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings():
    """Default engine settings, independent of the process environment."""
    return EngineSettings()


@pytest.fixture
def bull_call_spread():
    """Buy 100 call @ 5, sell 110 call @ 2: net debit 3."""
    return [make_leg("Buy", "Call", 100, 5), make_leg("Sell", "Call", 110, 2)]


@pytest.fixture
def long_straddle():
    """Buy 100 call @ 6 + buy 100 put @ 4: net debit 10."""
    return [make_leg("Buy", "Call", 100, 6), make_leg("Buy", "Put", 100, 4)]


@pytest.fixture
def reverse_iron_condor():
    """Outer wings bought, inner strikes sold."""
    return [
        make_leg("Buy", "Put", 90, 1),
        make_leg("Sell", "Put", 95, 2),
        make_leg("Sell", "Call", 105, 2),
        make_leg("Buy", "Call", 110, 1),
    ]
