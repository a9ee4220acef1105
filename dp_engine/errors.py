"""Exceptions raised by the solvers."""

from __future__ import annotations


class DpEngineError(Exception):
    """Base class for every dp_engine failure."""


class InvalidInputError(DpEngineError, ValueError):
    """Raised when solver arguments are out of range or malformed.

    Always raised before any table is allocated, so no partial result
    ever escapes.
    """


class ConfigError(DpEngineError, ValueError):
    """Raised when an environment override cannot be parsed."""
