#!/usr/bin/env python3
"""Command-line front end for the strategy analytics engine.

Usage:
    option-analytics analyze legs.json --margin 500 --curve
    option-analytics classify legs.json

The input file holds either a list of legs or an object with ``legs`` and
optional ``asset_price`` / ``margin_required``:

    {"legs": [{"action": "Buy", "type": "Call", "strike": "100", "premium": "5"}],
     "margin_required": 500}
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from option_analytics.chart import build_chart_data
from option_analytics.config import LOG_LEVELS, get_settings
from option_analytics.metrics import compute_metrics
from option_analytics.records import to_chart_model, to_trade_record
from option_analytics.strategy_engine import classify


class InputError(Exception):
    """The legs file is missing, unreadable, or not the expected JSON shape."""


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level:<7} | {message}")


def load_payload(path: str) -> Dict[str, Any]:
    """Read a legs file into ``{"legs": [...], "asset_price": ..., "margin_required": ...}``."""
    try:
        data = json.loads(Path(path).read_text())
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, list):
        data = {"legs": data}
    if not isinstance(data, dict) or not isinstance(data.get("legs", []), list):
        raise InputError(f"{path} must contain a list of legs or an object with a 'legs' list")
    if not all(isinstance(leg, dict) for leg in data.get("legs", [])):
        raise InputError(f"Every leg in {path} must be a JSON object")
    return data


def _classify_output(legs: List[dict]) -> Dict[str, Any]:
    c = classify(legs)
    return {
        "name": c.name,
        "category": c.category,
        "direction": c.direction.value,
        "is_credit": c.is_credit,
        "is_reverse": c.is_reverse,
        "option_type": c.composition.value,
    }


def _analyze_output(payload: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    legs = payload.get("legs", [])
    asset_price = args.asset_price if args.asset_price is not None else payload.get("asset_price")
    margin = args.margin if args.margin is not None else payload.get("margin_required")

    metrics = compute_metrics(legs, asset_price=asset_price, margin_required=margin)
    logger.info("{}: net premium {:.2f}, breakevens {}",
                metrics.strategy_name, metrics.net_premium, list(metrics.breakevens))

    output: Dict[str, Any] = {"metrics": metrics.to_dict()}
    if args.record:
        output["record"] = to_trade_record(metrics).model_dump()
    if args.curve:
        chart = build_chart_data(legs, asset_price=asset_price)
        logger.debug("Chart has {} points", len(chart.points))
        output["chart"] = to_chart_model(chart).model_dump()
    return output


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="option-analytics",
                                     description="Options strategy payoff analytics")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
                        help="Override OPTION_ANALYTICS_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Metrics (and optionally chart data) for a leg set")
    analyze.add_argument("file", help="JSON file with legs")
    analyze.add_argument("--asset-price", type=float, default=None, help="Current underlying price")
    analyze.add_argument("--margin", type=float, default=None, help="Margin required, for ROI")
    analyze.add_argument("--curve", action="store_true", help="Include payoff chart data")
    analyze.add_argument("--record", action="store_true", help="Include the trade-record fields")

    classify_cmd = sub.add_parser("classify", help="Strategy classification only")
    classify_cmd.add_argument("file", help="JSON file with legs")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    try:
        payload = load_payload(args.file)
    except InputError as e:
        logger.error(str(e))
        return 1

    if args.command == "classify":
        output = _classify_output(payload.get("legs", []))
    else:
        output = _analyze_output(payload, args)

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
