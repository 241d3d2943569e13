"""Strategy registry: single source of truth for strategy display metadata."""

from .types import StrategyDef, StrategyKind as K

SINGLE_LEG = "Single Leg"
VERTICAL_SPREAD = "Vertical Spread"
COMBINATION = "Combination"
CONDOR = "Condor"
BUTTERFLY = "Butterfly"
CUSTOM = "Custom"
NOT_APPLICABLE = "N/A"

STRATEGIES: dict[K, StrategyDef] = {
    # -- Single leg --
    K.LONG_CALL:            StrategyDef(K.LONG_CALL,            "Long Call",             SINGLE_LEG),
    K.LONG_PUT:             StrategyDef(K.LONG_PUT,             "Long Put",              SINGLE_LEG),
    K.NAKED_CALL:           StrategyDef(K.NAKED_CALL,           "Naked Call",            SINGLE_LEG),
    K.NAKED_PUT:            StrategyDef(K.NAKED_PUT,            "Naked Put",             SINGLE_LEG),
    # -- Verticals --
    K.BULL_CALL_SPREAD:     StrategyDef(K.BULL_CALL_SPREAD,     "Bull Call Spread",      VERTICAL_SPREAD),
    K.BEAR_CALL_SPREAD:     StrategyDef(K.BEAR_CALL_SPREAD,     "Bear Call Spread",      VERTICAL_SPREAD),
    K.BULL_PUT_SPREAD:      StrategyDef(K.BULL_PUT_SPREAD,      "Bull Put Spread",       VERTICAL_SPREAD),
    K.BEAR_PUT_SPREAD:      StrategyDef(K.BEAR_PUT_SPREAD,      "Bear Put Spread",       VERTICAL_SPREAD),
    # -- Call + put combinations --
    K.STRADDLE:             StrategyDef(K.STRADDLE,             "Straddle",              COMBINATION),
    K.STRANGLE:             StrategyDef(K.STRANGLE,             "Strangle",              COMBINATION),
    # -- Four legs --
    K.IRON_CONDOR:          StrategyDef(K.IRON_CONDOR,          "Iron Condor",           CONDOR),
    K.REVERSE_IRON_CONDOR:  StrategyDef(K.REVERSE_IRON_CONDOR,  "Reverse Iron Condor",   CONDOR, is_reverse=True),
    K.LONG_CALL_BUTTERFLY:  StrategyDef(K.LONG_CALL_BUTTERFLY,  "Long Calls Butterfly",  BUTTERFLY),
    K.SHORT_CALL_BUTTERFLY: StrategyDef(K.SHORT_CALL_BUTTERFLY, "Short Calls Butterfly", BUTTERFLY),
    K.LONG_PUT_BUTTERFLY:   StrategyDef(K.LONG_PUT_BUTTERFLY,   "Long Puts Butterfly",   BUTTERFLY),
    K.SHORT_PUT_BUTTERFLY:  StrategyDef(K.SHORT_PUT_BUTTERFLY,  "Short Puts Butterfly",  BUTTERFLY),
    K.CALL_CONDOR:          StrategyDef(K.CALL_CONDOR,          "Calls Condor",          CONDOR),
    K.REVERSE_CALL_CONDOR:  StrategyDef(K.REVERSE_CALL_CONDOR,  "Reverse Calls Condor",  CONDOR, is_reverse=True),
    K.PUT_CONDOR:           StrategyDef(K.PUT_CONDOR,           "Puts Condor",           CONDOR),
    K.REVERSE_PUT_CONDOR:   StrategyDef(K.REVERSE_PUT_CONDOR,   "Reverse Puts Condor",   CONDOR, is_reverse=True),
    # -- Fallbacks --
    K.CUSTOM:               StrategyDef(K.CUSTOM,               "Custom Strategy",       CUSTOM),
    K.NOT_APPLICABLE:       StrategyDef(K.NOT_APPLICABLE,       "N/A",                   NOT_APPLICABLE),
}
