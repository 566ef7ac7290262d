"""Blankness validators.

A string is blank when it is None or whitespace-only. ``NotBlankValidator``
is the usual check for required text fields; ``BlankValidator`` asserts the
opposite, e.g. for honeypot fields that must stay empty.
"""

from __future__ import annotations

from typing import Optional

from scoped_validation.core.enums import ErrorKind
from scoped_validation.core.utils import is_blank
from .base import BaseValidator


class BlankValidator(BaseValidator):
    """Valid when the string is None or whitespace-only."""

    kind = ErrorKind.BLANK

    def __init__(self, value: Optional[str], label: str, key: Optional[str] = None) -> None:
        super().__init__(label, key)
        self.value = value

    def is_valid(self) -> bool:
        return is_blank(self.value)


class NotBlankValidator(BaseValidator):
    """Valid when the string has at least one non-whitespace character."""

    kind = ErrorKind.NOT_BLANK

    def __init__(self, value: Optional[str], label: str, key: Optional[str] = None) -> None:
        super().__init__(label, key)
        self.value = value

    def is_valid(self) -> bool:
        return not is_blank(self.value)


__all__ = ["BlankValidator", "NotBlankValidator"]
