"""Fluent builder for declaring checks against a validation context.

Usage:
    >>> from scoped_validation import Validation
    >>> def address_rules(address, v):
    ...     v.not_blank(address.get("street"), "street").presence(address.get("zip"), "zip")
    >>> (
    ...     Validation("user")
    ...     .not_blank(user.get("name"), "name")
    ...     .greater_than_or_equal_to(user["age"], 18, "age")
    ...     .is_valid(user.get("address"), "address", address_rules)
    ...     .and_throw()
    ... )
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Sized, TypeVar, Union

from scoped_validation.core.enums import EvaluationMode
from scoped_validation.core.utils import require
from .config import ValidationSettings
from .exceptions import ValidationException
from .models import ValidationContext
from .validators import (
    BlankValidator,
    ErrorPredicate,
    GreaterThanOrEqualToValidator,
    GreaterThanValidator,
    LessThanOrEqualToValidator,
    LessThanValidator,
    NotBlankValidator,
    PredicateValidator,
    PresenceOrEmptyValidator,
    PresenceValidator,
    Validator,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
NestedFn = Callable[[T, "Validation"], Any]


class Validation:
    """Declare checks against one labeled scope.

    Every check method returns this Validation for chaining. A failing check
    never raises; it adds a ValidationError to the scope. ``and_throw()`` turns
    a tree with errors into a ValidationException.

    In IMMEDIATE mode (default) each check is evaluated as it is declared. In
    DEFERRED mode checks are registered as validators and evaluated by
    ``validate()`` (or implicitly by ``and_throw()``). Nested validations
    share the mode and fail_fast flag of their parent.

    Args:
        label: Name of the root scope.
        mode: Evaluation discipline for the whole tree.
        fail_fast: Reserved policy flag; carried to nested validations.

    Raises:
        ValueError: If label is missing or mode is unknown.
    """

    def __init__(
        self,
        label: str,
        mode: Union[EvaluationMode, str] = EvaluationMode.IMMEDIATE,
        fail_fast: bool = False,
    ) -> None:
        require(label, "label required")
        self._context = ValidationContext(label)
        self._mode = EvaluationMode(mode)
        self._fail_fast = fail_fast

    @classmethod
    def from_settings(cls, label: str, settings: ValidationSettings) -> "Validation":
        """Create a root Validation using loaded settings."""
        require(settings, "ValidationSettings required")
        return cls(label, mode=settings.mode, fail_fast=settings.fail_fast)

    @classmethod
    def _bind(
        cls, context: ValidationContext, mode: EvaluationMode, fail_fast: bool
    ) -> "Validation":
        require(context, "ValidationContext required")
        validation = cls.__new__(cls)
        validation._context = context
        validation._mode = mode
        validation._fail_fast = fail_fast
        return validation

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def context(self) -> ValidationContext:
        return self._context

    @property
    def label(self) -> str:
        return self._context.label

    @property
    def mode(self) -> EvaluationMode:
        return self._mode

    @property
    def fail_fast(self) -> bool:
        return self._fail_fast

    def has_errors(self) -> bool:
        return self._context.has_errors()

    def __repr__(self) -> str:
        return f"Validation(label={self.label!r}, mode={self._mode.value!r})"

    # ------------------------------------------------------------------
    # Built-in checks
    # ------------------------------------------------------------------

    def presence(self, value: Any, label: str, key: Optional[str] = None) -> "Validation":
        """Check that value is not None."""
        return self.check(PresenceValidator(value, label, key))

    def presence_or_empty(
        self, collection: Optional[Sized], label: str, key: Optional[str] = None
    ) -> "Validation":
        """Check that a collection is not None and not empty."""
        return self.check(PresenceOrEmptyValidator(collection, label, key))

    presence_and_not_empty = presence_or_empty

    def blank(self, s: Optional[str], label: str, key: Optional[str] = None) -> "Validation":
        """Check that a string is None or whitespace-only."""
        return self.check(BlankValidator(s, label, key))

    def not_blank(self, s: Optional[str], label: str, key: Optional[str] = None) -> "Validation":
        """Check that a string has a non-whitespace character."""
        return self.check(NotBlankValidator(s, label, key))

    def greater_than(
        self, subject: Any, bound: Any, label: str, key: Optional[str] = None
    ) -> "Validation":
        """Check ``subject > bound``. Subject must not be None."""
        return self.check(GreaterThanValidator(subject, bound, label, key))

    def greater_than_or_equal_to(
        self, subject: Any, bound: Any, label: str, key: Optional[str] = None
    ) -> "Validation":
        """Check ``subject >= bound``. Subject must not be None."""
        return self.check(GreaterThanOrEqualToValidator(subject, bound, label, key))

    def less_than(
        self, subject: Any, bound: Any, label: str, key: Optional[str] = None
    ) -> "Validation":
        """Check ``subject < bound``. Subject must not be None."""
        return self.check(LessThanValidator(subject, bound, label, key))

    def less_than_or_equal_to(
        self, subject: Any, bound: Any, label: str, key: Optional[str] = None
    ) -> "Validation":
        """Check ``subject <= bound``. Subject must not be None."""
        return self.check(LessThanOrEqualToValidator(subject, bound, label, key))

    # ------------------------------------------------------------------
    # Custom checks and composition
    # ------------------------------------------------------------------

    def is_valid(self, *args: Any) -> "Validation":
        """Fold a custom check or a nested scope into this scope.

        Accepted forms:
            is_valid(validator): any object implementing the Validator protocol
            is_valid(predicate): zero-argument callable returning an optional
                ValidationError
            is_valid(value, label, nested_fn): validate a sub-object in a
                nested scope

        Raises:
            ValueError: If the single argument is None.
            TypeError: If the arguments match none of the forms.
        """
        if len(args) == 3:
            return self.nested(*args)
        if len(args) == 1:
            target = args[0]
            require(target, "validator required")
            if not isinstance(target, type):
                if isinstance(target, Validator):
                    return self.check(target)
                if callable(target):
                    return self.satisfies(target)
            raise TypeError(
                f"is_valid() expects a Validator or a callable, got {type(target).__name__}"
            )
        raise TypeError(f"is_valid() takes 1 or 3 arguments ({len(args)} given)")

    def check(self, validator: Validator) -> "Validation":
        """Evaluate or register a validator according to the mode."""
        require(validator, "validator required")
        self._context.ensure_declaring()
        if self._mode is EvaluationMode.DEFERRED:
            self._context.add_validator(validator)
        elif validator.is_invalid():
            self._context.add_error(validator.build_validation_error())
        return self

    def satisfies(self, predicate: ErrorPredicate) -> "Validation":
        """Fold the error returned by ``predicate()``, if any, into this scope."""
        if predicate is None or not callable(predicate):
            raise ValueError("predicate required")
        self._context.ensure_declaring()
        if self._mode is EvaluationMode.DEFERRED:
            self._context.add_validator(PredicateValidator(predicate))
            return self
        error = predicate()
        if error is not None:
            self._context.add_error(error)
        return self

    def nested(self, value: T, label: str, nested_fn: NestedFn) -> "Validation":
        """Validate ``value`` in a new child scope named ``label``.

        ``nested_fn(value, nested_validation)`` is called synchronously and
        declares its checks against the nested validation.
        """
        require(label, "label required")
        if nested_fn is None or not callable(nested_fn):
            raise ValueError("nested function required")
        child = ValidationContext(label)
        self._context.add_nested_context(child)
        nested_fn(value, Validation._bind(child, self._mode, self._fail_fast))
        return self

    def each(self, items: Iterable[T], label: str, nested_fn: NestedFn) -> "Validation":
        """Validate every member of a collection in its own nested scope.

        Scopes are labeled ``"{label}[{index}]"``.
        """
        require(items, "items required")
        require(label, "label required")
        for index, item in enumerate(items):
            self.nested(item, f"{label}[{index}]", nested_fn)
        return self

    def merge(self, other: "Validation") -> "Validation":
        """Attach another validation's tree as a nested scope of this one."""
        require(other, "otherValidation required")
        if other is self:
            raise ValueError("Cannot merge a Validation into itself")
        self._context.add_nested_context(other.context)
        return self

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def validate(self) -> ValidationContext:
        """Run the deferred evaluation pass over the whole tree.

        Returns:
            The evaluated root context.

        Raises:
            RuntimeError: If the tree was already evaluated.
        """
        logger.debug("Validating '%s' (%s)", self.label, self._mode.value)
        return self._context.validate()

    def and_throw(self) -> None:
        """Raise ValidationException if the tree holds any error.

        In DEFERRED mode the tree is evaluated first when ``validate()`` has
        not been called yet. In IMMEDIATE mode merged deferred trees that are
        still pending are evaluated.

        Raises:
            ValidationException: Carrying the root context.
        """
        if self._mode is EvaluationMode.DEFERRED and not self._context.evaluated:
            self.validate()
        else:
            self._context.validate_pending()
        if self._context.has_errors():
            logger.debug(
                "Validation of '%s' failed with %d errors",
                self.label,
                self._context.error_count(),
            )
            raise ValidationException(self._context)


__all__ = ["Validation", "NestedFn"]
