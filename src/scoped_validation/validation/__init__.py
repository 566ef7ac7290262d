"""Validation engine for scoped-validation.

This module provides a fluent validation framework for structured data:

- **Models**: ValidationError, ValidationContext - the labeled error tree
- **Validators**: Built-in and custom checks (see validation/validators/)
- **Builder**: Validation - declare checks, nest scopes, merge trees, throw
- **Config**: Message templates and evaluation settings (import from .config)
- **Runner**: validate_records(), validate_frame(), print_report() - batch helpers

Public API:
    Validation: Fluent builder bound to one scope
    ValidationContext: Node of the error tree with reporting helpers
    ValidationError: One failed check (label, key, message)
    ValidationException: Raised by and_throw() with the failed tree

Usage:
    >>> from scoped_validation.validation import Validation, ValidationException
    >>> try:
    ...     Validation("signup").not_blank(form.get("email"), "email").and_throw()
    ... except ValidationException as e:
    ...     print(e.context.errors_by_path())
    {'email': ['email cannot be blank']}

For implementation details:
    - See validation/validators/__init__.py for the validator interface
    - See validation/config.py for messages and settings
    - See validation/builder.py for evaluation modes
"""

from __future__ import annotations

from scoped_validation.core.enums import ErrorKind, EvaluationMode

from .builder import Validation
from .config import ValidationSettings, load_settings
from .exceptions import ValidationException
from .models import ValidationContext, ValidationError
from .runner import print_report, validate_frame, validate_records

__all__ = [
    # Data models
    "ValidationError",
    "ValidationContext",
    # Builder and exception
    "Validation",
    "ValidationException",
    # Configuration
    "ErrorKind",
    "EvaluationMode",
    "ValidationSettings",
    "load_settings",
    # Batch helpers
    "validate_records",
    "validate_frame",
    "print_report",
]
