"""
Engine Settings
Loads sampling and charting parameters from the environment (.env supported).
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Mapping, Optional, TypeVar

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENV_PREFIX = "OPTION_ANALYTICS_"

# Level names the CLI's loguru sink accepts
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineSettings:
    """Tunable fidelity of the metrics sampler and the chart window."""
    sample_points: int = 500        # intervals across the metrics price range
    range_low_factor: float = 0.5   # range start = min strike * factor
    range_high_factor: float = 1.5  # range end = max strike * factor
    fallback_min_strike: float = 10.0
    fallback_max_strike: float = 100.0
    chart_margin: float = 100.0     # chart window extends this far past the strikes
    chart_steps: int = 200
    log_level: str = "INFO"


def _read(env: Mapping[str, str], name: str, cast: Callable[[str], T], default: T,
          valid: Callable[[T], bool] = lambda _: True) -> T:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s%s=%r, using %r", ENV_PREFIX, name, raw, default)
        return default
    if not valid(value):
        logger.warning("Ignoring out-of-range %s%s=%r, using %r", ENV_PREFIX, name, raw, default)
        return default
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> EngineSettings:
    """Build settings from *env* (defaults to ``os.environ`` after loading .env)."""
    if env is None:
        load_dotenv()
        env = os.environ

    defaults = EngineSettings()
    positive = lambda v: v > 0  # noqa: E731
    return EngineSettings(
        sample_points=_read(env, "SAMPLE_POINTS", int, defaults.sample_points, positive),
        range_low_factor=_read(env, "RANGE_LOW", float, defaults.range_low_factor, lambda v: v >= 0),
        range_high_factor=_read(env, "RANGE_HIGH", float, defaults.range_high_factor, positive),
        fallback_min_strike=defaults.fallback_min_strike,
        fallback_max_strike=defaults.fallback_max_strike,
        chart_margin=_read(env, "CHART_MARGIN", float, defaults.chart_margin, lambda v: v >= 0),
        chart_steps=_read(env, "CHART_STEPS", int, defaults.chart_steps, positive),
        log_level=_read(env, "LOG_LEVEL", str.upper, defaults.log_level, lambda v: v in LOG_LEVELS),
    )


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Process-wide settings, loaded once."""
    return load_settings()
