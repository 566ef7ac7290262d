"""Ordering validators.

Compare a subject against a bound with the subject's natural ordering.
Subjects must not be None: guard them with a presence check first, since
``None`` has no ordering against numbers, dates or strings.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Optional

from scoped_validation.core.enums import ErrorKind
from .base import BaseValidator


class ComparisonValidator(BaseValidator):
    """Valid when ``compare(subject, bound)`` holds."""

    compare: Callable[[Any, Any], bool]

    def __init__(self, subject: Any, bound: Any, label: str, key: Optional[str] = None) -> None:
        super().__init__(label, key)
        self.subject = subject
        self.bound = bound

    def is_valid(self) -> bool:
        return bool(type(self).compare(self.subject, self.bound))

    def params(self) -> Dict[str, Any]:
        return {"bound": self.bound}


class GreaterThanValidator(ComparisonValidator):
    kind = ErrorKind.GREATER_THAN
    compare = operator.gt


class GreaterThanOrEqualToValidator(ComparisonValidator):
    kind = ErrorKind.GREATER_THAN_OR_EQUAL_TO
    compare = operator.ge


class LessThanValidator(ComparisonValidator):
    kind = ErrorKind.LESS_THAN
    compare = operator.lt


class LessThanOrEqualToValidator(ComparisonValidator):
    kind = ErrorKind.LESS_THAN_OR_EQUAL_TO
    compare = operator.le


__all__ = [
    "ComparisonValidator",
    "GreaterThanValidator",
    "GreaterThanOrEqualToValidator",
    "LessThanValidator",
    "LessThanOrEqualToValidator",
]
