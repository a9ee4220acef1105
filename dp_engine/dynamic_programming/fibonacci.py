# Fibonacci with memoization - Python
# Records every resolved call so the recursion tree can be replayed step by step.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from dp_engine.config import Limits, default_limits
from dp_engine.validation import require_int

logger = logging.getLogger(__name__)

BASE = "base"
MEMO = "memo"
COMPUTED = "computed"


@dataclass(frozen=True, slots=True)
class TraceEntry:
    """One resolved call of ``fib(argument)``."""

    step: int
    argument: int
    value: int
    kind: str
    description: str

    def to_dict(self) -> dict:
        return {
            "step": self.step,
            "argument": self.argument,
            "value": self.value,
            "kind": self.kind,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class FibonacciResult:
    n: int
    value: int
    trace: Tuple[TraceEntry, ...]

    def to_dict(self) -> dict:
        return {
            "n": self.n,
            "value": self.value,
            "trace": [entry.to_dict() for entry in self.trace],
        }


@dataclass(frozen=True, slots=True)
class GrowthPoint:
    x: int
    y: int


def _record(trace: List[TraceEntry], k: int, value: int, kind: str, description: str) -> None:
    trace.append(TraceEntry(len(trace), k, value, kind, description))


def _fib(k: int, memo: Dict[int, int], trace: List[TraceEntry]) -> int:
    if k <= 1:
        _record(trace, k, k, BASE, f"Base case fib({k}) = {k}")
        return k

    if k in memo:
        _record(trace, k, memo[k], MEMO, f"Retrieved fib({k}) = {memo[k]} from memo")
        return memo[k]

    # Left subtree resolves completely before the right one starts.
    memo[k] = _fib(k - 1, memo, trace) + _fib(k - 2, memo, trace)
    _record(trace, k, memo[k], COMPUTED, f"Computed fib({k}) = {memo[k]}")
    return memo[k]


def fibonacci_solve(n: int, *, limits: Optional[Limits] = None) -> FibonacciResult:
    """
    n-th Fibonacci number by memoized recursion, with a full call trace.
    Time: O(n), Space: O(n)

    Args:
        n: Index into the sequence, 0 <= n <= limits.fibonacci_max_n
        limits: Overrides the module-level limits

    Returns:
        FibonacciResult with the value and the trace in resolution order.
        Memo hits short-circuit their subtree, so the trace holds
        2n - 1 entries for n >= 1.
    """
    limits = limits or default_limits()
    require_int("n", n, 0, limits.fibonacci_max_n)

    memo: Dict[int, int] = {}
    trace: List[TraceEntry] = []
    value = _fib(n, memo, trace)

    logger.debug("fib(%d) = %d in %d steps", n, value, len(trace))
    return FibonacciResult(n=n, value=value, trace=tuple(trace))


def fibonacci_growth_curve(n: int, *, limits: Optional[Limits] = None) -> Tuple[GrowthPoint, ...]:
    """Points (k, fib(k)) for k in [0, n], each from an independent solve."""
    limits = limits or default_limits()
    require_int("n", n, 0, limits.fibonacci_max_n)
    return tuple(
        GrowthPoint(k, fibonacci_solve(k, limits=limits).value)
        for k in range(n + 1)
    )


# Example usage
if __name__ == "__main__":
    result = fibonacci_solve(6)
    for entry in result.trace:
        print(f"{entry.step:>3}  {entry.description}")
    print(f"fib(6) = {result.value}")
