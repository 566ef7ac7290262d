"""Exception raised by ``Validation.and_throw()``."""

from __future__ import annotations

from scoped_validation.core.utils import require
from .models import ValidationContext


class ValidationException(Exception):
    """Carries a validation tree that has at least one error.

    The tree is exposed as-is so callers can map it to a field-level error
    response without re-running validation.
    """

    def __init__(self, context: ValidationContext) -> None:
        require(context, "ValidationContext required")
        self.context = context
        super().__init__(
            f"Validation of '{context.label}' failed with {context.error_count()} errors"
        )


__all__ = ["ValidationException"]
