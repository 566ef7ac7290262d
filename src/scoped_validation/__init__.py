"""scoped-validation: composable validation with labeled, hierarchical error reports.

Checks are declared fluently against a named scope; nested objects and
collections get nested scopes, and the resulting tree is the error report.

The library only logs through ``logging.getLogger(__name__)``. Applications
call ``setup_logging()`` to get colored console output of evaluation passes
and batch runs.
"""

__all__ = [
    "__version__",
    "ErrorKind",
    "EvaluationMode",
    "Validation",
    "ValidationContext",
    "ValidationError",
    "ValidationException",
    "setup_logging",
]

__version__ = "0.1.0"

from .core.enums import ErrorKind, EvaluationMode  # noqa: E402
from .core.log import setup_logging  # noqa: E402
from .validation import (  # noqa: E402
    Validation,
    ValidationContext,
    ValidationError,
    ValidationException,
)
