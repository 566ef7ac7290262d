"""Validators: single stateless pass/fail tests.

Each validator captures the value(s) under test at construction and answers
``is_valid()`` / ``is_invalid()`` any number of times without side effects.
When invalid, ``build_validation_error()`` describes the failure.

To implement a custom validator:

1. Define a class with ``is_valid()``, ``is_invalid()`` and
   ``build_validation_error()`` (the Validator protocol), or subclass
   BaseValidator and set ``kind``
2. Pass an instance to ``Validation.is_valid()``

Example:
    ```python
    from scoped_validation.validation.models import ValidationError

    class EvenValidator:
        def __init__(self, value: int, label: str) -> None:
            self.value = value
            self.label = label

        def is_valid(self) -> bool:
            return self.value % 2 == 0

        def is_invalid(self) -> bool:
            return not self.is_valid()

        def build_validation_error(self) -> ValidationError:
            return ValidationError(self.label, "validation.even", f"{self.label} must be even")
    ```
"""

from __future__ import annotations

from .base import BaseValidator, Validator
from .blank import BlankValidator, NotBlankValidator
from .comparison import (
    ComparisonValidator,
    GreaterThanOrEqualToValidator,
    GreaterThanValidator,
    LessThanOrEqualToValidator,
    LessThanValidator,
)
from .predicate import ErrorPredicate, PredicateValidator
from .presence import PresenceOrEmptyValidator, PresenceValidator

__all__ = [
    "Validator",
    "BaseValidator",
    "PresenceValidator",
    "PresenceOrEmptyValidator",
    "BlankValidator",
    "NotBlankValidator",
    "ComparisonValidator",
    "GreaterThanValidator",
    "GreaterThanOrEqualToValidator",
    "LessThanValidator",
    "LessThanOrEqualToValidator",
    "PredicateValidator",
    "ErrorPredicate",
]
