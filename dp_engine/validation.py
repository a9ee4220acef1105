"""Argument checks shared by the solvers."""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

from dp_engine.errors import InvalidInputError

logger = logging.getLogger(__name__)


def reject(message: str) -> NoReturn:
    logger.debug("rejected input: %s", message)
    raise InvalidInputError(message)


def require_int(name: str, value, minimum: int = 0, maximum: Optional[int] = None) -> int:
    """Return ``value`` if it is an int within ``[minimum, maximum]``.

    Booleans are refused even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        reject(f"{name} must be an integer, got {type(value).__name__}")
    if value < minimum:
        reject(f"{name} must be >= {minimum}, got {value}")
    if maximum is not None and value > maximum:
        reject(f"{name} must be <= {maximum}, got {value}")
    return value
