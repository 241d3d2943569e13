"""
Tests for the metrics engine: net premium, max profit/loss, breakevens, ROI.

Source: option_analytics/metrics/engine.py
"""

import copy

import pytest

from option_analytics.config import EngineSettings
from option_analytics.metrics import (
    NOT_COMPUTED,
    UNBOUNDED,
    Bounded,
    compute_metrics,
    find_breakevens,
    price_range,
    sample_prices,
    upside_slope,
)
from option_analytics.strategy_engine import classify
from tests.conftest import make_leg, raw_leg


# ---------------------------------------------------------------------------
# Sampling helpers
# ---------------------------------------------------------------------------

class TestSampling:
    def test_price_range_from_strikes(self, bull_call_spread, settings):
        assert price_range(bull_call_spread, settings) == (50.0, 165.0)

    def test_price_range_fallback_without_strikes(self, settings):
        legs = [make_leg("Buy", "Call", 0, 1)]
        assert price_range(legs, settings) == (5.0, 150.0)

    def test_sample_prices_inclusive(self):
        prices = sample_prices(50.0, 150.0, 500)
        assert len(prices) == 501
        assert prices[0] == 50.0
        assert prices[-1] == 150.0
        assert prices[250] == 100.0

    def test_breakevens_interpolated(self):
        points = [(0.0, -2.0), (1.0, 2.0), (2.0, 4.0)]
        assert find_breakevens(points) == [0.5]

    def test_zero_sample_counts_once(self):
        points = [(9.0, 1.0), (10.0, 0.0), (11.0, -1.0)]
        assert find_breakevens(points) == [10.0]

    def test_negative_breakevens_dropped(self):
        points = [(0.0, 5.0), (1.0, 10.0)]
        assert find_breakevens(points) == []


# ---------------------------------------------------------------------------
# Closed-form strategies
# ---------------------------------------------------------------------------

class TestBullCallSpread:
    def test_closed_form_within_a_cent(self, bull_call_spread):
        m = compute_metrics(bull_call_spread)
        debit = 3.0
        assert m.net_premium == pytest.approx(-debit)
        assert isinstance(m.max_loss, Bounded)
        assert m.max_loss.value == pytest.approx(debit, abs=0.01)
        assert m.max_profit.value == pytest.approx((110 - 100) * 1 - debit, abs=0.01)

    def test_breakeven_is_lower_strike_plus_debit(self, bull_call_spread):
        m = compute_metrics(bull_call_spread)
        assert m.breakevens == pytest.approx((103.0,), abs=0.01)

    def test_contracts_scale(self):
        legs = [make_leg("Buy", "Call", 100, 5, contracts=2), make_leg("Sell", "Call", 110, 2, contracts=2)]
        m = compute_metrics(legs)
        assert m.net_premium == pytest.approx(-6.0)
        assert m.max_loss.value == pytest.approx(6.0, abs=0.01)
        assert m.max_profit.value == pytest.approx(14.0, abs=0.01)


class TestStraddle:
    @pytest.mark.parametrize("contracts", [1, 3])
    def test_long_straddle(self, contracts):
        legs = [make_leg("Buy", "Call", 100, 6, contracts), make_leg("Buy", "Put", 100, 4, contracts)]
        m = compute_metrics(legs)
        assert m.breakevens == pytest.approx((90.0, 110.0), abs=0.01)
        assert m.max_loss.value == pytest.approx(10.0 * contracts, abs=0.01)
        assert m.max_profit is UNBOUNDED

    def test_short_straddle_unbounded_loss(self):
        legs = [make_leg("Sell", "Call", 100, 6), make_leg("Sell", "Put", 100, 4)]
        m = compute_metrics(legs)
        assert m.max_loss is UNBOUNDED
        assert m.max_profit.value == pytest.approx(10.0, abs=0.01)
        assert m.classification.direction.value == "Short"


class TestSingleLegBounds:
    def test_long_call_unbounded_profit(self):
        m = compute_metrics([make_leg("Buy", "Call", 100, 5)])
        assert m.max_profit is UNBOUNDED
        assert m.max_loss.value == pytest.approx(5.0)
        assert m.breakevens == (105.0,)

    def test_naked_call_unbounded_loss(self):
        m = compute_metrics([make_leg("Sell", "Call", 100, 5)])
        assert m.max_loss is UNBOUNDED
        assert m.max_profit.value == pytest.approx(5.0)

    def test_long_put_profit_at_zero(self):
        m = compute_metrics([make_leg("Buy", "Put", 100, 5, contracts=2)])
        assert m.max_profit == Bounded(190.0)
        assert m.max_loss.value == pytest.approx(10.0)

    def test_naked_put_loss_at_zero(self):
        m = compute_metrics([make_leg("Sell", "Put", 100, 5)])
        assert m.max_loss == Bounded(95.0)
        assert m.breakevens == (95.0,)

    def test_put_premium_above_strike_floors_at_zero(self):
        m = compute_metrics([make_leg("Buy", "Put", 10, 15)])
        assert m.max_profit == Bounded(0.0)

    def test_upside_slope(self, long_straddle, bull_call_spread):
        assert upside_slope(long_straddle) == 1
        assert upside_slope(bull_call_spread) == 0
        assert upside_slope([make_leg("Sell", "Call", 100, 1, contracts=4)]) == -4


class TestIronCondor:
    def test_credit_condor_metrics(self, reverse_iron_condor):
        m = compute_metrics(reverse_iron_condor)
        assert m.net_premium == pytest.approx(2.0)
        assert m.max_profit.value == pytest.approx(2.0, abs=0.01)
        assert m.max_loss.value == pytest.approx(3.0, abs=0.01)
        assert m.breakevens == pytest.approx((93.0, 107.0), abs=0.01)
        assert m.classification.name == "Reverse Iron Condor"
        assert m.classification.is_credit is True


# ---------------------------------------------------------------------------
# ROI, markers, explanations
# ---------------------------------------------------------------------------

class TestRoiAndMarkers:
    def test_roi_uses_margin(self, reverse_iron_condor):
        m = compute_metrics(reverse_iron_condor, margin_required=500)
        assert m.roi == pytest.approx(0.4)

    def test_roi_accepts_form_string(self, reverse_iron_condor):
        assert compute_metrics(reverse_iron_condor, margin_required="250").roi == pytest.approx(0.8)

    def test_negative_margin_divides_through(self, reverse_iron_condor):
        assert compute_metrics(reverse_iron_condor, margin_required=-500).roi == pytest.approx(-0.4)

    @pytest.mark.parametrize("margin", [None, 0, "", "abc"])
    def test_roi_zero_without_margin(self, bull_call_spread, margin):
        assert compute_metrics(bull_call_spread, margin_required=margin).roi == 0.0

    def test_prob_profit_never_computed(self, bull_call_spread):
        assert compute_metrics(bull_call_spread).prob_profit is NOT_COMPUTED

    def test_explanations_mention_strikes(self, bull_call_spread):
        m = compute_metrics(bull_call_spread)
        assert "110" in m.max_profit_explanation
        assert "100" in m.max_loss_explanation

    def test_custom_has_no_explanation(self):
        legs = [make_leg("Buy", "Call", 100, 5), make_leg("Buy", "Call", 105, 2)]
        m = compute_metrics(legs)
        assert m.classification.is_custom
        assert m.max_profit_explanation == ""
        assert m.max_loss_explanation == ""

    def test_straddle_explanation_follows_direction(self, long_straddle):
        m = compute_metrics(long_straddle)
        assert m.max_profit_explanation.startswith("Unlimited")

    def test_short_straddle_explanation(self):
        m = compute_metrics([make_leg("Sell", "Call", 100, 6), make_leg("Sell", "Put", 100, 4)])
        assert m.max_loss_explanation.startswith("Unlimited")

    def test_mixed_action_straddle_has_no_explanation(self):
        legs = [make_leg("Buy", "Call", 100, 5), make_leg("Sell", "Put", 100, 6)]
        m = compute_metrics(legs)
        assert m.classification.name == "Straddle"
        assert m.max_profit is UNBOUNDED
        assert (m.max_profit_explanation, m.max_loss_explanation) == ("", "")

    def test_mixed_action_strangle_has_no_explanation(self):
        legs = [make_leg("Sell", "Put", 95, 2), make_leg("Buy", "Call", 105, 2)]
        m = compute_metrics(legs)
        assert m.classification.name == "Strangle"
        assert m.max_profit_explanation == ""

    def test_sold_wing_iron_condor_explained(self):
        legs = [
            make_leg("Sell", "Put", 90, 1),
            make_leg("Buy", "Put", 95, 2),
            make_leg("Buy", "Call", 105, 2),
            make_leg("Sell", "Call", 110, 1),
        ]
        m = compute_metrics(legs)
        assert m.classification.name == "Iron Condor"
        assert "90" in m.max_profit_explanation
        assert "95" in m.max_loss_explanation

    def test_all_bought_iron_condor_has_no_explanation(self):
        legs = [
            make_leg("Buy", "Put", 90, 1),
            make_leg("Buy", "Put", 95, 2),
            make_leg("Buy", "Call", 105, 2),
            make_leg("Buy", "Call", 110, 1),
        ]
        m = compute_metrics(legs)
        assert m.classification.name == "Iron Condor"
        assert m.max_profit is UNBOUNDED
        assert (m.max_profit_explanation, m.max_loss_explanation) == ("", "")

    def test_mixed_wing_call_condor_has_no_explanation(self):
        legs = [
            make_leg("Buy", "Call", 90, 12),
            make_leg("Buy", "Call", 95, 8),
            make_leg("Sell", "Call", 105, 3),
            make_leg("Sell", "Call", 110, 1),
        ]
        m = compute_metrics(legs)
        assert m.classification.name == "Calls Condor"
        assert m.max_profit_explanation == ""


# ---------------------------------------------------------------------------
# Degenerate input and invariants
# ---------------------------------------------------------------------------

class TestDegenerate:
    def test_no_legs(self):
        m = compute_metrics([])
        assert m.net_premium == 0.0
        assert m.max_profit == Bounded(0.0)
        assert m.max_loss == Bounded(0.0)
        assert m.breakevens == ()
        assert m.roi == 0.0
        assert m.classification.name == "N/A"

    def test_none_legs(self):
        assert compute_metrics(None).classification.name == "N/A"

    def test_malformed_fields_do_not_raise(self):
        legs = [{"action": "Buy", "type": "Call", "strike": "oops", "premium": None, "contracts": "x"}]
        m = compute_metrics(legs, asset_price="??", margin_required="??")
        assert m.net_premium == 0.0
        assert m.classification.name == "Long Call"

    def test_bounds_are_never_missing(self):
        for legs in ([make_leg("Buy", "Call", 100, 5)],
                     [make_leg("Sell", "Put", 0, 0)],
                     [make_leg("Buy", "Put", 90, 1), make_leg("Buy", "Put", 90, 1), make_leg("Sell", "Call", 1, 1)]):
            m = compute_metrics(legs)
            assert isinstance(m.max_profit, Bounded) or m.max_profit is UNBOUNDED
            assert isinstance(m.max_loss, Bounded) or m.max_loss is UNBOUNDED


class TestInvariants:
    def test_breakevens_sorted_and_unique(self):
        legs = [
            make_leg("Buy", "Put", 80, 1),
            make_leg("Sell", "Put", 90, 3),
            make_leg("Sell", "Call", 110, 3),
            make_leg("Buy", "Call", 120, 1),
        ]
        breakevens = compute_metrics(legs).breakevens
        assert list(breakevens) == sorted(set(round(b, 2) for b in breakevens))

    def test_idempotent_on_copied_input(self):
        raw = [raw_leg("Sell", "Put", 95, 2.1), raw_leg("Buy", "Put", 90, 0.7, 2)]
        assert compute_metrics(copy.deepcopy(raw), 100, 400) == compute_metrics(copy.deepcopy(raw), 100, 400)

    def test_classification_matches_classifier(self, reverse_iron_condor, long_straddle, bull_call_spread):
        for legs in (reverse_iron_condor, long_straddle, bull_call_spread):
            assert compute_metrics(legs).classification.name == classify(legs).name

    def test_finer_sampling_converges(self, reverse_iron_condor):
        coarse = compute_metrics(reverse_iron_condor, settings=EngineSettings(sample_points=500))
        fine = compute_metrics(reverse_iron_condor, settings=EngineSettings(sample_points=5000))
        assert coarse.max_profit.value == pytest.approx(fine.max_profit.value, abs=0.01)
        assert coarse.max_loss.value == pytest.approx(fine.max_loss.value, abs=0.01)
        assert coarse.breakevens == pytest.approx(fine.breakevens, abs=0.01)
