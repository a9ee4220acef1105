"""Limits construction and loading from the environment."""

import pytest

from dp_engine.config import FIBONACCI_HARD_CAP, Limits, default_limits
from dp_engine.dynamic_programming.knapsack import Item, knapsack_solve
from dp_engine.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DP_ENGINE_FIBONACCI_MAX_N", "DP_ENGINE_MAX_CAPACITY", "DP_ENGINE_MAX_TARGET"):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    limits = Limits.from_env()
    assert (limits.fibonacci_max_n, limits.max_capacity, limits.max_target) == (30, 100, 100)


def test_env_override(monkeypatch):
    monkeypatch.setenv("DP_ENGINE_MAX_CAPACITY", "250")
    monkeypatch.setenv("DP_ENGINE_FIBONACCI_MAX_N", "45")
    limits = Limits.from_env()
    assert limits.max_capacity == 250
    assert limits.fibonacci_max_n == 45
    assert limits.max_target == 100


def test_default_limits_reads_env_at_call_time(monkeypatch):
    assert default_limits().max_target == 100
    monkeypatch.setenv("DP_ENGINE_MAX_TARGET", "7")
    assert default_limits().max_target == 7


def test_constructor_values_ignore_env(monkeypatch):
    monkeypatch.setenv("DP_ENGINE_MAX_CAPACITY", "100")
    limits = Limits(max_capacity=200)
    assert limits.max_capacity == 200

    result = knapsack_solve([Item(1, "anvil", 150, 7)], 150, limits=limits)
    assert result.max_value == 7


@pytest.mark.parametrize("raw", ["lots", "1.5", "-3"])
def test_bad_override(monkeypatch, raw):
    monkeypatch.setenv("DP_ENGINE_MAX_TARGET", raw)
    with pytest.raises(ConfigError, match="DP_ENGINE_MAX_TARGET"):
        Limits.from_env()


def test_bad_env_does_not_break_explicit_limits(monkeypatch):
    monkeypatch.setenv("DP_ENGINE_MAX_TARGET", "lots")
    assert Limits(max_target=5).max_target == 5


@pytest.mark.parametrize("kwargs", [
    {"max_target": -1},
    {"max_capacity": -10},
    {"fibonacci_max_n": 2.5},
    {"max_target": True},
])
def test_constructor_values_checked(kwargs):
    with pytest.raises(ConfigError):
        Limits(**kwargs)


def test_fibonacci_cap():
    with pytest.raises(ConfigError):
        Limits(fibonacci_max_n=FIBONACCI_HARD_CAP + 1)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
