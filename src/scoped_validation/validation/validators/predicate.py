"""Custom validator wrapping a caller-supplied predicate."""

from __future__ import annotations

from typing import Callable, Optional

from ..models import ValidationError

ErrorPredicate = Callable[[], Optional[ValidationError]]


class PredicateValidator:
    """Valid when ``predicate()`` returns None.

    The predicate builds its own ValidationError on failure, so it controls
    label, key and message. It must be side-effect free: it is called once by
    ``is_valid()`` and again by ``build_validation_error()``.

    Examples:
        >>> def passwords_match():
        ...     if form["password"] != form["confirmation"]:
        ...         return ValidationError("confirmation", "validation.match", "passwords differ")
        ...     return None
        >>> PredicateValidator(passwords_match).is_valid()
    """

    def __init__(self, predicate: ErrorPredicate) -> None:
        if predicate is None or not callable(predicate):
            raise ValueError("predicate required")
        self.predicate = predicate

    def is_valid(self) -> bool:
        return self.predicate() is None

    def is_invalid(self) -> bool:
        return not self.is_valid()

    def build_validation_error(self) -> ValidationError:
        error = self.predicate()
        if error is None:
            raise RuntimeError("build_validation_error() called on a passing predicate")
        return error


__all__ = ["PredicateValidator", "ErrorPredicate"]
