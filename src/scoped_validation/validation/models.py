"""Validation data models.

This module defines core data structures for validation results:
- ValidationError: One failed check, labeled and keyed
- ValidationContext: A labeled scope holding its validators, errors and
  nested scopes; the tree of contexts is the validation report
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

import pandas as pd

from scoped_validation.core.enums import ErrorKind
from scoped_validation.core.utils import require
from .config import FALLBACK_MESSAGE

if TYPE_CHECKING:
    from .validators import Validator

logger = logging.getLogger(__name__)

ScopePath = Tuple[str, ...]
ErrorFormatter = Callable[[ScopePath, "ValidationError"], str]


@dataclass(frozen=True)
class ValidationError:
    """A single failed check.

    Attributes:
        label: Scope-relative name of the thing checked (e.g., "street").
        key: Stable machine-readable error kind (e.g., "validation.presence").
        message: Human-readable default text. Derived from label and key when omitted.
        params: Raw parameters of the failure (e.g., the comparison bound) so a
            renderer can build its own text. Not part of equality.

    Examples:
        >>> ValidationError("age", "validation.greaterThan", "age must be greater than 18")
        ValidationError(label='age', key='validation.greaterThan', ...)
        >>> ValidationError("age", "custom.key").message
        'age is invalid (custom.key)'
    """

    label: str
    key: str
    message: Optional[str] = None
    params: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        """Validate field constraints and fill in derived values."""
        require(self.label, "label required")
        require(self.key, "key required")
        if isinstance(self.key, ErrorKind):
            object.__setattr__(self, "key", self.key.value)
        if self.message is None:
            object.__setattr__(
                self, "message", FALLBACK_MESSAGE.format(label=self.label, key=self.key)
            )


@dataclass(eq=False)
class ValidationContext:
    """A labeled node in the validation tree.

    A label represents something that can accrue errors: a field of a form,
    an object, or one member of a collection. Nested contexts hold the errors
    of sub-objects, so the tree mirrors the shape of the validated data.

    Attributes:
        label: Name of this scope.
        validators: Pending validators, evaluated in order by ``validate()``.
        errors: Errors accumulated at this scope, in declaration order.
        nested_contexts: Child scopes, in declaration order.

    Examples:
        >>> root = ValidationContext("user")
        >>> address = ValidationContext("address")
        >>> root.add_nested_context(address)
        >>> address.add_error(ValidationError("street", "validation.presence"))
        >>> root.has_errors()
        True
        >>> root.errors_by_path()
        {'address.street': ['street is invalid (validation.presence)']}
    """

    label: str
    validators: List["Validator"] = field(default_factory=list)
    errors: List[ValidationError] = field(default_factory=list)
    nested_contexts: List["ValidationContext"] = field(default_factory=list)
    evaluated: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        require(self.label, "label required")

    # ------------------------------------------------------------------
    # Declaration
    # ------------------------------------------------------------------

    def ensure_declaring(self) -> None:
        """Raise RuntimeError once the context has been evaluated."""
        if self.evaluated:
            raise RuntimeError(f"Validation context '{self.label}' has already been evaluated")

    def add_error(self, error: ValidationError) -> None:
        """Append an error to this scope.

        Raises:
            ValueError: If error is None.
            RuntimeError: If the context was already evaluated.
        """
        require(error, "ValidationError required")
        self.ensure_declaring()
        self.errors.append(error)

    def add_validator(self, validator: "Validator") -> None:
        """Register a validator for the deferred evaluation pass."""
        require(validator, "Validator required")
        self.ensure_declaring()
        self.validators.append(validator)

    def add_nested_context(self, context: "ValidationContext") -> None:
        """Attach a child scope.

        Only direct self-attachment is rejected; attaching an ancestor as a
        descendant is the caller's responsibility.
        """
        require(context, "ValidationContext required")
        if context is self:
            raise ValueError(f"Validation context '{self.label}' cannot be nested in itself")
        self.ensure_declaring()
        self.nested_contexts.append(context)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def validate(self) -> "ValidationContext":
        """Evaluate pending validators, then every nested context.

        Errors of invalid validators are appended in registration order.
        Nested contexts that were evaluated on their own (e.g., a merged
        tree) are not evaluated again.

        Returns:
            This context.

        Raises:
            RuntimeError: If this context was already evaluated.
        """
        self.ensure_declaring()
        for validator in self.validators:
            if validator.is_invalid():
                self.errors.append(validator.build_validation_error())
        self.evaluated = True
        logger.debug(
            "Evaluated %d validators in '%s': %d errors",
            len(self.validators),
            self.label,
            len(self.errors),
        )
        for nested in self.nested_contexts:
            if not nested.evaluated:
                nested.validate()
        return self

    def validate_pending(self) -> None:
        """Evaluate nested trees that still hold pending validators.

        Leaves this context declarable. Used when a deferred tree was merged
        into a tree whose checks were evaluated at declaration time.
        """
        for nested in self.nested_contexts:
            if nested.evaluated:
                continue
            if nested.validators:
                nested.validate()
            else:
                nested.validate_pending()

    def has_errors(self) -> bool:
        """True if this scope or any nested scope holds an error."""
        return bool(self.errors) or any(ctx.has_errors() for ctx in self.nested_contexts)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def find(self, label: str) -> Optional["ValidationContext"]:
        """Return the first direct nested context labeled ``label``, if any."""
        for ctx in self.nested_contexts:
            if ctx.label == label:
                return ctx
        return None

    def iter_contexts(self, _path: ScopePath = ()) -> Iterator[Tuple[ScopePath, "ValidationContext"]]:
        """Yield ``(path, context)`` for this context and its descendants, depth first."""
        path = _path + (self.label,)
        yield path, self
        for nested in self.nested_contexts:
            yield from nested.iter_contexts(path)

    def iter_errors(self) -> Iterator[Tuple[ScopePath, ValidationError]]:
        """Yield ``(path, error)`` for every error in the tree, in declaration order.

        ``path`` is the tuple of context labels from this context down to the
        context that owns the error.
        """
        for path, ctx in self.iter_contexts():
            for error in ctx.errors:
                yield path, error

    def error_count(self) -> int:
        """Count errors in this context and all nested contexts."""
        return sum(1 for _ in self.iter_errors())

    def errors_by_path(
        self,
        formatter: Optional[ErrorFormatter] = None,
        separator: str = ".",
        include_root: bool = False,
    ) -> Dict[str, List[str]]:
        """Map scope paths to rendered messages.

        Args:
            formatter: Called with ``(path, error)`` to render a message.
                Defaults to the error's own message.
            separator: Joins the labels of the path.
            include_root: Keep this context's label as the first path segment.

        Returns:
            Ordered dict of ``"address.street" -> ["street must be present"]``.
        """
        result: Dict[str, List[str]] = {}
        for path, error in self.iter_errors():
            scope = path if include_root else path[1:]
            key = separator.join(scope + (error.label,))
            text = formatter(path, error) if formatter is not None else error.message
            result.setdefault(key, []).append(text)
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert the tree into plain data."""
        return {
            "label": self.label,
            "errors": [
                {
                    "label": e.label,
                    "key": e.key,
                    "message": e.message,
                    "params": dict(e.params),
                }
                for e in self.errors
            ],
            "nested": [ctx.to_dict() for ctx in self.nested_contexts],
        }

    def to_frame(self) -> pd.DataFrame:
        """Flatten all errors into a DataFrame.

        Returns:
            DataFrame with columns ``path``, ``label``, ``key``, ``message``;
            one row per error, in declaration order. ``path`` is the dotted
            context path including this context's label.
        """
        rows = [
            {
                "path": ".".join(path),
                "label": error.label,
                "key": error.key,
                "message": error.message,
            }
            for path, error in self.iter_errors()
        ]
        return pd.DataFrame(rows, columns=["path", "label", "key", "message"])

    def summary(self) -> str:
        """Generate a concise text summary of the tree.

        Examples:
            >>> print(context.summary())
            Validation Summary:
              Root: user
              Scopes: 3 (1 with errors)
              Errors: 2
        """
        contexts = [ctx for _, ctx in self.iter_contexts()]
        with_errors = sum(1 for ctx in contexts if ctx.errors)
        return (
            f"Validation Summary:\n"
            f"  Root: {self.label}\n"
            f"  Scopes: {len(contexts)} ({with_errors} with errors)\n"
            f"  Errors: {self.error_count()}"
        )

    def to_markdown(self, formatter: Optional[ErrorFormatter] = None) -> str:
        """Generate a Markdown report, one section per scope with errors."""
        from datetime import datetime

        lines = [
            f"# Validation Report: {self.label}",
            "",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Scopes:** {sum(1 for _ in self.iter_contexts())}",
            f"- **Errors:** {self.error_count()}",
            "",
        ]

        if not self.has_errors():
            lines.append("## ✅ All Checks Passed")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
            return "\n".join(lines)

        lines.append("## ❌ Errors")
        lines.append("")
        for path, ctx in self.iter_contexts():
            if not ctx.errors:
                continue
            lines.append(f"### {'.'.join(path)} ({len(ctx.errors)} errors)")
            lines.append("")
            for error in ctx.errors:
                text = formatter(path, error) if formatter is not None else error.message
                lines.append(f"- `{error.key}` {error.label}: {text}")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a JSON report with summary counts and the full tree."""
        import json

        report_data = {
            "summary": {
                "root": self.label,
                "has_errors": self.has_errors(),
                "errors": self.error_count(),
            },
            "errors_by_path": self.errors_by_path(),
            "tree": self.to_dict(),
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False, default=str)

    def to_console_summary(self) -> str:
        """Generate the summary plus one line per failing path."""
        lines = [self.summary(), ""]

        if not self.has_errors():
            lines.append("✅ All validation checks passed!")
        else:
            lines.append("Error Details:")
            for path, messages in self.errors_by_path(include_root=True).items():
                lines.append(f"❌ {path}")
                for msg in messages:
                    lines.append(f"   - {msg}")

        return "\n".join(lines)


__all__ = ["ValidationError", "ValidationContext", "ErrorFormatter", "ScopePath"]
