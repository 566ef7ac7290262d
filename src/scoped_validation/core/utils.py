"""Core utility functions for scoped-validation.

This module provides the argument guards and string helpers shared by the
models, validators and builder.
"""

from __future__ import annotations

from typing import Any, Optional


def require(value: Any, message: str) -> None:
    """Fail fast on a missing required argument.

    Strings are treated as missing when empty, since labels and keys are
    never allowed to be empty.

    Args:
        value: The argument to check.
        message: Message for the raised ValueError (e.g., "label required").

    Raises:
        ValueError: If value is None or an empty string.

    Examples:
        >>> require("email", "label required")
        >>> require(None, "label required")
        Traceback (most recent call last):
            ...
        ValueError: label required
    """
    if value is None or (isinstance(value, str) and value == ""):
        raise ValueError(message)


def is_blank(s: Optional[str]) -> bool:
    """Return True if ``s`` is None or contains only whitespace."""
    return s is None or s.strip() == ""


__all__ = ["require", "is_blank"]
