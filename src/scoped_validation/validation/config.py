"""Validation configuration constants.

This module centralizes the default error messages and the evaluation
settings a ``Validation`` is built with.

Message templates:
    Each built-in ErrorKind has a default English template. Templates use
    ``str.format`` fields: ``{label}`` always, ``{bound}`` for comparisons.
    Renderers that need other languages should ignore ``message`` and
    re-render from ``(label, key, params)``.

Settings:
    - mode: "immediate" (default) or "deferred"
    - fail_fast: carried through nested validations, no short-circuit behavior
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from scoped_validation.core.enums import ErrorKind, EvaluationMode

# ============================================================================
# MESSAGE TEMPLATES
# ============================================================================

DEFAULT_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.PRESENCE: "{label} must be present",
    ErrorKind.PRESENCE_OR_EMPTY: "{label} must be present and not empty",
    ErrorKind.BLANK: "{label} must be blank",
    ErrorKind.NOT_BLANK: "{label} cannot be blank",
    ErrorKind.GREATER_THAN: "{label} must be greater than {bound}",
    ErrorKind.GREATER_THAN_OR_EQUAL_TO: "{label} must be greater than or equal to {bound}",
    ErrorKind.LESS_THAN: "{label} must be less than {bound}",
    ErrorKind.LESS_THAN_OR_EQUAL_TO: "{label} must be less than or equal to {bound}",
}

# Used when a ValidationError is built without an explicit message
FALLBACK_MESSAGE = "{label} is invalid ({key})"


# ============================================================================
# SETTINGS
# ============================================================================


@dataclass(frozen=True)
class ValidationSettings:
    """Evaluation settings threaded through a Validation tree.

    Attributes:
        mode: When checks are evaluated.
        fail_fast: Reserved policy flag, propagated to nested validations.
    """

    mode: EvaluationMode = EvaluationMode.IMMEDIATE
    fail_fast: bool = False

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not isinstance(self.mode, EvaluationMode):
            raise ValueError(f"Invalid mode: {self.mode!r}. Must be an EvaluationMode.")
        if not isinstance(self.fail_fast, bool):
            raise ValueError(f"Invalid fail_fast: {self.fail_fast!r}. Must be a bool.")


DEFAULT_SETTINGS = ValidationSettings()

_SETTINGS_KEYS = ("mode", "fail_fast")


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def get_message_template(kind: ErrorKind) -> str:
    """Get the default message template for an error kind.

    Args:
        kind: Built-in error kind.

    Returns:
        Template string with ``{label}`` (and ``{bound}`` for comparisons).

    Raises:
        ValueError: If kind is not a known ErrorKind.

    Examples:
        >>> get_message_template(ErrorKind.PRESENCE)
        '{label} must be present'
    """
    try:
        return DEFAULT_MESSAGES[ErrorKind(kind)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown error kind: {kind}") from e


def format_message(kind: ErrorKind, label: str, **params: Any) -> str:
    """Render the default message for ``kind``.

    Examples:
        >>> format_message(ErrorKind.GREATER_THAN, "age", bound=18)
        'age must be greater than 18'
    """
    return get_message_template(kind).format(label=label, **params)


def parse_settings(data: Dict[str, Any]) -> ValidationSettings:
    """Build ValidationSettings from a plain mapping.

    Args:
        data: Mapping with optional keys ``mode`` and ``fail_fast``.

    Returns:
        ValidationSettings with defaults for missing keys.

    Raises:
        ValueError: If the mapping has unknown keys or invalid values.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Settings must be a mapping, got {type(data).__name__}")

    unknown = sorted(set(data) - set(_SETTINGS_KEYS))
    if unknown:
        raise ValueError(
            f"Unknown settings keys: {', '.join(unknown)}. "
            f"Valid keys: {', '.join(_SETTINGS_KEYS)}"
        )

    mode_value = data.get("mode", DEFAULT_SETTINGS.mode.value)
    try:
        mode = EvaluationMode(str(mode_value).lower())
    except ValueError as e:
        valid_modes = ", ".join(m.value for m in EvaluationMode)
        raise ValueError(f"Unknown mode: '{mode_value}'. Valid modes: {valid_modes}") from e

    return ValidationSettings(mode=mode, fail_fast=data.get("fail_fast", DEFAULT_SETTINGS.fail_fast))


def load_settings(path: Union[str, Path]) -> ValidationSettings:
    """Load ValidationSettings from a YAML file.

    An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or holds invalid settings.

    Examples:
        >>> # settings.yaml
        >>> # mode: deferred
        >>> # fail_fast: false
        >>> load_settings("settings.yaml").mode
        <EvaluationMode.DEFERRED: 'deferred'>
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read settings file {path}: {e}") from e

    return parse_settings(data or {})


__all__ = [
    "DEFAULT_MESSAGES",
    "DEFAULT_SETTINGS",
    "FALLBACK_MESSAGE",
    "ValidationSettings",
    "format_message",
    "get_message_template",
    "load_settings",
    "parse_settings",
]
