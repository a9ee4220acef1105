"""Tabulated and memoized solvers with path reconstruction."""

from dp_engine.dynamic_programming.coin_change import (  # noqa: F401
    UNREACHABLE,
    US_COINS,
    CoinChangeResult,
    coin_breakdown,
    coin_change_solve,
    coin_name,
)
from dp_engine.dynamic_programming.fibonacci import (  # noqa: F401
    FibonacciResult,
    GrowthPoint,
    TraceEntry,
    fibonacci_growth_curve,
    fibonacci_solve,
)
from dp_engine.dynamic_programming.knapsack import (  # noqa: F401
    DEFAULT_ITEMS,
    Item,
    KnapsackResult,
    item_breakdown,
    knapsack_solve,
)
from dp_engine.dynamic_programming.lcs import LcsResult, lcs_solve  # noqa: F401
