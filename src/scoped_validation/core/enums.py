"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable machine-readable keys for the built-in checks.

    Values are strings so a member compares equal to its literal key and
    serializes without conversion.
    """

    PRESENCE = "validation.presence"
    PRESENCE_OR_EMPTY = "validation.presenceOrEmpty"
    BLANK = "validation.blank"
    NOT_BLANK = "validation.notBlank"
    GREATER_THAN = "validation.greaterThan"
    GREATER_THAN_OR_EQUAL_TO = "validation.greaterThanOrEqualTo"
    LESS_THAN = "validation.lessThan"
    LESS_THAN_OR_EQUAL_TO = "validation.lessThanOrEqualTo"


class EvaluationMode(str, Enum):
    """When declared checks are evaluated.

    IMMEDIATE evaluates each check as it is declared. DEFERRED registers
    validators and evaluates the whole tree in one ``validate()`` pass.
    """

    IMMEDIATE = "immediate"
    DEFERRED = "deferred"


__all__ = ["ErrorKind", "EvaluationMode"]
