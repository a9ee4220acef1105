"""
Input limits for the solvers.

Limits.from_env() applies these environment overrides to the defaults:

    DP_ENGINE_FIBONACCI_MAX_N   largest n accepted by fibonacci_solve (30)
    DP_ENGINE_MAX_CAPACITY      largest knapsack capacity (100)
    DP_ENGINE_MAX_TARGET        largest coin change target (100)

The limits bound table memory and recursion depth; none of them is
required by the algorithms themselves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dp_engine.errors import ConfigError

ENV_PREFIX = "DP_ENGINE_"

# fibonacci_solve recurses once per level.
FIBONACCI_HARD_CAP = 500


@dataclass
class Limits:
    """Solver input bounds."""

    fibonacci_max_n: int = 30
    max_capacity: int = 100
    max_target: int = 100

    def __post_init__(self):
        for key in self.__dataclass_fields__:
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{key} must be a non-negative integer, got {value!r}")

        if self.fibonacci_max_n > FIBONACCI_HARD_CAP:
            raise ConfigError(
                f"fibonacci_max_n={self.fibonacci_max_n} exceeds the recursion cap of {FIBONACCI_HARD_CAP}"
            )

    @classmethod
    def from_env(cls) -> "Limits":
        """Defaults, overridden by any DP_ENGINE_* variables that are set."""
        overrides = {}
        for key in cls.__dataclass_fields__:
            env_key = ENV_PREFIX + key.upper()
            env_value = os.getenv(env_key)
            if env_value is None:
                continue
            try:
                parsed = int(env_value)
            except ValueError:
                raise ConfigError(f"{env_key} must be an integer, got {env_value!r}") from None
            if parsed < 0:
                raise ConfigError(f"{env_key} must be non-negative, got {parsed}")
            overrides[key] = parsed
        return cls(**overrides)


def default_limits() -> Limits:
    """Limits used when a solver is called without ``limits=``; reads the environment on each call."""
    return Limits.from_env()
