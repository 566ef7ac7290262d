"""Shared enums, helpers and logging setup."""

from .enums import ErrorKind, EvaluationMode
from .log import setup_logging
from .utils import is_blank, require

__all__ = ["ErrorKind", "EvaluationMode", "is_blank", "require", "setup_logging"]
