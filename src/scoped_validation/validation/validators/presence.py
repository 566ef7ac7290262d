"""Presence validators.

A missing value (None) is the most common failure in form and payload data.
Collections additionally need at least one member to count as present.
"""

from __future__ import annotations

from typing import Any, Optional, Sized

from scoped_validation.core.enums import ErrorKind
from .base import BaseValidator


class PresenceValidator(BaseValidator):
    """Valid when the value is not None."""

    kind = ErrorKind.PRESENCE

    def __init__(self, value: Any, label: str, key: Optional[str] = None) -> None:
        super().__init__(label, key)
        self.value = value

    def is_valid(self) -> bool:
        return self.value is not None


class PresenceOrEmptyValidator(BaseValidator):
    """Valid when the collection is not None and has at least one element."""

    kind = ErrorKind.PRESENCE_OR_EMPTY

    def __init__(self, collection: Optional[Sized], label: str, key: Optional[str] = None) -> None:
        super().__init__(label, key)
        self.collection = collection

    def is_valid(self) -> bool:
        return self.collection is not None and len(self.collection) > 0


__all__ = ["PresenceValidator", "PresenceOrEmptyValidator"]
