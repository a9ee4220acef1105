"""
dp_engine.cli
=============

Runs one solver per invocation and prints its result as JSON.

Usage::

    dp-engine fib 10 --curve
    dp-engine knapsack --capacity 50 --items items.json
    dp-engine lcs AGGTAB GXTXAYB --table
    dp-engine coins 23 --coins 1,5,10,25

Exit codes: 0 on success (an unreachable coin target is a result, not an
error), 2 on invalid input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dp_engine import __version__
from dp_engine.config import Limits
from dp_engine.dynamic_programming.coin_change import (
    DEFAULT_TARGET,
    US_COINS,
    coin_breakdown,
    coin_change_solve,
)
from dp_engine.dynamic_programming.fibonacci import fibonacci_growth_curve, fibonacci_solve
from dp_engine.dynamic_programming.knapsack import (
    DEFAULT_CAPACITY,
    DEFAULT_ITEMS,
    Item,
    item_breakdown,
    knapsack_solve,
)
from dp_engine.dynamic_programming.lcs import DEFAULT_FIRST, DEFAULT_SECOND, lcs_solve
from dp_engine.errors import DpEngineError, InvalidInputError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def _parse_coins(raw: str) -> List[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {raw!r}") from None


def _load_items(path: Path) -> List[Item]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidInputError(f"cannot read items from {path}: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise InvalidInputError(f"{path} must contain a JSON list of item objects")
    return [Item.from_dict(entry) for entry in data]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dp-engine",
        description="Dynamic-programming solvers with path reconstruction.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--table", action="store_true", help="include the DP table in the output")

    sub = parser.add_subparsers(dest="command", required=True)

    fib = sub.add_parser("fib", parents=[common], help="Fibonacci with memoization trace")
    fib.add_argument("n", type=int)
    fib.add_argument("--curve", action="store_true", help="include fib(k) for every k <= n")

    knap = sub.add_parser("knapsack", parents=[common], help="0/1 knapsack")
    knap.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    knap.add_argument("--items", type=Path, default=None, help="JSON list of {id, name, weight, value}")

    lcs = sub.add_parser("lcs", parents=[common], help="longest common subsequence")
    lcs.add_argument("first", nargs="?", default=DEFAULT_FIRST)
    lcs.add_argument("second", nargs="?", default=DEFAULT_SECOND)

    coins = sub.add_parser("coins", parents=[common], help="minimum coin change")
    coins.add_argument("target", type=int, nargs="?", default=DEFAULT_TARGET)
    coins.add_argument("--coins", type=_parse_coins, default=list(US_COINS))

    return parser


def _run(args: argparse.Namespace, limits: Limits) -> dict:
    if args.command == "fib":
        result = fibonacci_solve(args.n, limits=limits)
        out = result.to_dict()
        if args.curve:
            out["curve"] = [
                {"x": p.x, "y": p.y} for p in fibonacci_growth_curve(args.n, limits=limits)
            ]
        return out

    if args.command == "knapsack":
        items = _load_items(args.items) if args.items else list(DEFAULT_ITEMS)
        result = knapsack_solve(items, args.capacity, limits=limits)
        out = result.to_dict(include_table=args.table)
        out["utilization"] = round(result.utilization, 1)
        out["items"] = item_breakdown(items, result)
        return out

    if args.command == "lcs":
        return lcs_solve(args.first, args.second).to_dict(include_table=args.table)

    result = coin_change_solve(args.coins, args.target, limits=limits)
    out = result.to_dict(include_table=args.table)
    out["breakdown"] = coin_breakdown(result)
    return out


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    logger.debug("running %s", args.command)
    try:
        out = _run(args, Limits.from_env())
    except DpEngineError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(json.dumps(out, indent=2, ensure_ascii=False))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
