"""Validator interface and shared base class."""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, runtime_checkable

from scoped_validation.core.enums import ErrorKind
from scoped_validation.core.utils import require
from ..config import format_message
from ..models import ValidationError


@runtime_checkable
class Validator(Protocol):
    """Protocol defining the interface for validators.

    Any object with these three methods can be passed to
    ``Validation.is_valid()``; inheriting from BaseValidator is optional.

    Methods:
        is_valid: Run the check.
        is_invalid: Logical negation of is_valid.
        build_validation_error: Describe the failure. Only called when invalid.
    """

    def is_valid(self) -> bool:
        ...

    def is_invalid(self) -> bool:
        ...

    def build_validation_error(self) -> ValidationError:
        ...


class BaseValidator:
    """Common label/key handling for the built-in validators.

    Subclasses set ``kind`` and implement ``is_valid()``. The key defaults to
    ``kind`` and the message is rendered from the kind's template, so an
    overridden key keeps the built-in message.
    """

    kind: ErrorKind

    def __init__(self, label: str, key: Optional[str] = None) -> None:
        require(label, "label required")
        if key is None:
            key = self.kind.value
        require(key, "key required")
        self.label = label
        self.key = key

    def is_valid(self) -> bool:
        raise NotImplementedError

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def params(self) -> Dict[str, Any]:
        """Raw parameters interpolated into the message."""
        return {}

    def build_validation_error(self) -> ValidationError:
        params = self.params()
        return ValidationError(
            label=self.label,
            key=self.key,
            message=format_message(self.kind, self.label, **params),
            params=params,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r}, key={self.key!r})"


__all__ = ["Validator", "BaseValidator"]
