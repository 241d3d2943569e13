"""Plain-language max profit / max loss explanations per strategy."""

from typing import Dict, List, Optional, Tuple

from option_analytics.strategy_engine.types import (
    Action,
    Classification,
    Leg,
    StrategyKind as K,
)

# (max profit, max loss) templates. Placeholders: {strike} (single strike),
# {low} / {high} (outermost strikes), {middle} (butterfly body),
# {inner_low} / {inner_high} (condor body).
_OUTSIDE = "the underlying closes at or below {low} or at or above {high} at expiration"
_INSIDE = "the underlying closes between {inner_low} and {inner_high} at expiration"

TEMPLATES: Dict[K, Tuple[str, str]] = {
    K.LONG_CALL: (
        "Unlimited: the call keeps gaining as the underlying rises above {strike}.",
        "Limited to the premium paid if the underlying closes at or below {strike} at expiration.",
    ),
    K.LONG_PUT: (
        "Reached if the underlying falls to zero: {strike} per share minus the premium paid.",
        "Limited to the premium paid if the underlying closes at or above {strike} at expiration.",
    ),
    K.NAKED_CALL: (
        "Limited to the premium received if the underlying closes at or below {strike} at expiration.",
        "Unlimited: losses grow as the underlying rises above {strike}.",
    ),
    K.NAKED_PUT: (
        "Limited to the premium received if the underlying closes at or above {strike} at expiration.",
        "Reached if the underlying falls to zero: {strike} per share minus the premium received.",
    ),
    K.BULL_CALL_SPREAD: (
        "Strike width minus the net debit, when the underlying closes at or above {high} at expiration.",
        "Limited to the net debit if the underlying closes at or below {low} at expiration.",
    ),
    K.BEAR_CALL_SPREAD: (
        "Limited to the net credit if the underlying closes at or below {low} at expiration.",
        "Strike width minus the net credit, when the underlying closes at or above {high} at expiration.",
    ),
    K.BULL_PUT_SPREAD: (
        "Limited to the net credit if the underlying closes at or above {high} at expiration.",
        "Strike width minus the net credit, when the underlying closes at or below {low} at expiration.",
    ),
    K.BEAR_PUT_SPREAD: (
        "Strike width minus the net debit, when the underlying closes at or below {low} at expiration.",
        "Limited to the net debit if the underlying closes at or above {high} at expiration.",
    ),
    K.REVERSE_IRON_CONDOR: (
        "Limited to the net credit if " + _INSIDE + ".",
        "Wing width minus the net credit, when " + _OUTSIDE + ".",
    ),
    K.IRON_CONDOR: (
        "Reached when " + _OUTSIDE + ".",
        "Limited to the net debit if " + _INSIDE + ".",
    ),
    K.LONG_CALL_BUTTERFLY: (
        "Peaks when the underlying closes exactly at {middle} at expiration.",
        "Limited to the net debit when " + _OUTSIDE + ".",
    ),
    K.SHORT_CALL_BUTTERFLY: (
        "Limited to the net credit when " + _OUTSIDE + ".",
        "Greatest when the underlying closes exactly at {middle} at expiration.",
    ),
    K.REVERSE_CALL_CONDOR: (
        "Reached when " + _INSIDE + ".",
        "Limited to the net debit when " + _OUTSIDE + ".",
    ),
    K.CALL_CONDOR: (
        "Reached when " + _OUTSIDE + ".",
        "Greatest when " + _INSIDE + ".",
    ),
}
TEMPLATES[K.LONG_PUT_BUTTERFLY] = TEMPLATES[K.LONG_CALL_BUTTERFLY]
TEMPLATES[K.SHORT_PUT_BUTTERFLY] = TEMPLATES[K.SHORT_CALL_BUTTERFLY]
TEMPLATES[K.REVERSE_PUT_CONDOR] = TEMPLATES[K.REVERSE_CALL_CONDOR]
TEMPLATES[K.PUT_CONDOR] = TEMPLATES[K.CALL_CONDOR]

_PLAIN_CONDORS = (K.IRON_CONDOR, K.CALL_CONDOR, K.PUT_CONDOR)

# Straddles and strangles share a name whether bought or sold; the legs' common
# action decides. Mixed-action pairs get no text.
SIDED_TEMPLATES: Dict[Tuple[K, Action], Tuple[str, str]] = {
    (K.STRADDLE, Action.BUY): (
        "Unlimited: grows as the underlying moves away from {strike} in either direction.",
        "Limited to the net debit if the underlying closes exactly at {strike} at expiration.",
    ),
    (K.STRADDLE, Action.SELL): (
        "Limited to the net credit if the underlying closes exactly at {strike} at expiration.",
        "Unlimited: grows as the underlying moves away from {strike} in either direction.",
    ),
    (K.STRANGLE, Action.BUY): (
        "Unlimited: grows as the underlying moves below {low} or above {high}.",
        "Limited to the net debit if the underlying closes between {low} and {high} at expiration.",
    ),
    (K.STRANGLE, Action.SELL): (
        "Limited to the net credit if the underlying closes between {low} and {high} at expiration.",
        "Unlimited: grows as the underlying moves below {low} or above {high}.",
    ),
}


def _fmt(strike: float) -> str:
    text = f"{strike:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def _strike_params(legs: List[Leg]) -> Dict[str, str]:
    strikes = sorted({leg.strike for leg in legs})
    if not strikes:
        return {}
    params = {
        "strike": _fmt(strikes[0]),
        "low": _fmt(strikes[0]),
        "high": _fmt(strikes[-1]),
    }
    if len(strikes) == 3:
        params["middle"] = _fmt(strikes[1])
    if len(strikes) == 4:
        params["inner_low"] = _fmt(strikes[1])
        params["inner_high"] = _fmt(strikes[2])
    return params


def _outer_sells_inner_buys(legs: List[Leg]) -> bool:
    ordered = sorted(legs, key=lambda l: l.strike)
    return (ordered[0].is_sell and ordered[3].is_sell
            and ordered[1].is_buy and ordered[2].is_buy)


def _templates_for(kind: K, legs: List[Leg]) -> Optional[Tuple[str, str]]:
    if kind in (K.STRADDLE, K.STRANGLE):
        actions = {leg.action for leg in legs}
        if len(actions) != 1:
            return None
        return SIDED_TEMPLATES.get((kind, actions.pop()))
    # Plain condors are also the fallback name for any non-reverse arrangement;
    # only the sold-wings, bought-body layout matches the text.
    if kind in _PLAIN_CONDORS and not (len(legs) == 4 and _outer_sells_inner_buys(legs)):
        return None
    return TEMPLATES.get(kind)


def explain(classification: Classification, legs: List[Leg]) -> Tuple[str, str]:
    """(max profit, max loss) explanation text; empty strings when no template fits."""
    templates = _templates_for(classification.kind, legs)
    if templates is None:
        return "", ""
    params = _strike_params(legs)
    try:
        return templates[0].format(**params), templates[1].format(**params)
    except KeyError:
        return "", ""
