"""Tolerant parse-or-default policy for leg data coming from forms.

Leg fields arrive mid-edit: blank strings, ``None``, ``"12.5"``, numbers.
Nothing here raises on a bad numeric value; each field falls back to the
default in :data:`DEFAULTS` instead.

=============  ==========  ==============================================
field          default     accepted input
=============  ==========  ==============================================
strike         0.0         anything ``float()`` accepts, finite, >= 0
premium        0.0         anything ``float()`` accepts, finite, >= 0
contracts      1           integral value >= 1 (``"3"``, ``3``, ``3.0``)
action         Buy         "buy"/"b"/"long", "sell"/"s"/"short"
option_type    Call        "call"/"c", "put"/"p"
=============  ==========  ==============================================
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Union

from .types import Action, Leg, OptionType

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULTS",
    "parse_float",
    "parse_contracts",
    "parse_action",
    "parse_option_type",
    "parse_optional_float",
    "coerce_leg",
    "coerce_legs",
]

DEFAULTS: dict[str, Any] = {
    "strike": 0.0,
    "premium": 0.0,
    "contracts": 1,
    "action": Action.BUY,
    "option_type": OptionType.CALL,
}

_SELL_ALIASES = frozenset({"sell", "s", "short", "sto", "sell_to_open"})
_BUY_ALIASES = frozenset({"buy", "b", "long", "bto", "buy_to_open"})
_PUT_ALIASES = frozenset({"put", "p", "puts"})
_CALL_ALIASES = frozenset({"call", "c", "calls"})

# Form field names seen in saved legs, mapped to Leg attributes
_FIELD_ALIASES = {
    "option_type": ("option_type", "type", "optionType"),
    "contracts": ("contracts", "quantity", "qty"),
}


def _to_finite(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def parse_float(value: Any, default: float = 0.0) -> float:
    """Parse a non-negative finite float, or return *default*."""
    result = _to_finite(value)
    if result is None or result < 0:
        return default
    return result


def parse_optional_float(value: Any, allow_negative: bool = False) -> Optional[float]:
    """Like :func:`parse_float` but keeps "not supplied" distinguishable.

    Used for the optional asset price and margin inputs, where a blank field
    must not turn into a zero. Margin passes ``allow_negative=True`` so a
    negative figure still divides into ROI.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    result = _to_finite(value)
    if result is None or (result < 0 and not allow_negative):
        return None
    return result


def parse_contracts(value: Any, default: int = 1) -> int:
    """Parse a contract count >= 1.

    ``"2.7"`` truncates to 2 the way a form's integer parse does.
    """
    number = _to_finite(value)
    if number is None:
        return default
    count = int(number)
    return count if count >= 1 else default


def parse_action(value: Any) -> Action:
    if isinstance(value, Action):
        return value
    text = str(value or "").strip().lower()
    if text in _SELL_ALIASES:
        return Action.SELL
    if text in _BUY_ALIASES:
        return Action.BUY
    return DEFAULTS["action"]


def parse_option_type(value: Any) -> OptionType:
    if isinstance(value, OptionType):
        return value
    text = str(value or "").strip().lower()
    if text in _PUT_ALIASES:
        return OptionType.PUT
    if text in _CALL_ALIASES:
        return OptionType.CALL
    return DEFAULTS["option_type"]


def _field(raw: Mapping[str, Any], name: str) -> Any:
    for key in _FIELD_ALIASES.get(name, (name,)):
        if key in raw:
            return raw[key]
    return None


def coerce_leg(raw: Union[Leg, Mapping[str, Any]]) -> Leg:
    """Normalize a leg mapping into a :class:`Leg`.

    A ``Leg`` is returned unchanged. Anything that is neither a ``Leg`` nor a
    mapping is a caller bug and raises ``TypeError``.
    """
    if isinstance(raw, Leg):
        return raw
    if not isinstance(raw, Mapping):
        raise TypeError(f"leg must be a Leg or a mapping, got {type(raw).__name__}")

    return Leg(
        action=parse_action(_field(raw, "action")),
        option_type=parse_option_type(_field(raw, "option_type")),
        strike=parse_float(_field(raw, "strike"), DEFAULTS["strike"]),
        premium=parse_float(_field(raw, "premium"), DEFAULTS["premium"]),
        contracts=parse_contracts(_field(raw, "contracts"), DEFAULTS["contracts"]),
    )


def coerce_legs(legs: Optional[Iterable[Union[Leg, Mapping[str, Any]]]]) -> List[Leg]:
    """Normalize every leg, preserving entry order. ``None`` means no legs."""
    if legs is None:
        return []
    result = [coerce_leg(leg) for leg in legs]
    logger.debug("Coerced %d legs", len(result))
    return result
