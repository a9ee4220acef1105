"""dp_engine - dynamic-programming solvers that explain their answers."""

__all__ = [
    "__version__",
    "fibonacci_solve",
    "knapsack_solve",
    "lcs_solve",
    "coin_change_solve",
    "Item",
    "UNREACHABLE",
    "InvalidInputError",
]
__version__ = "0.1.0"

from dp_engine.errors import InvalidInputError  # noqa: E402, F401
from dp_engine.dynamic_programming import (  # noqa: E402, F401
    UNREACHABLE,
    Item,
    coin_change_solve,
    fibonacci_solve,
    knapsack_solve,
    lcs_solve,
)
