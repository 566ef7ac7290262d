"""Batch validation of record collections.

This module runs one set of rules over many records:
- validate_records(): Validates an iterable of records into one tree
- validate_frame(): Validates the rows of a pandas DataFrame
- print_report(): Displays a validation tree to console
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

import pandas as pd
from tqdm import tqdm

from scoped_validation.core.enums import EvaluationMode
from scoped_validation.core.utils import require
from .builder import NestedFn, Validation
from .models import ValidationContext

logger = logging.getLogger(__name__)


def validate_records(
    records: Iterable[Any],
    label: str,
    rules: NestedFn,
    mode: Union[EvaluationMode, str] = EvaluationMode.IMMEDIATE,
    progress: bool = False,
) -> Validation:
    """Validate every record in its own nested scope.

    Args:
        records: Records to validate (dicts, dataclasses, ...).
        label: Label of the root scope; records are nested as ``"{label}[{i}]"``.
        rules: Called as ``rules(record, validation)`` for each record.
        mode: Evaluation discipline. Deferred trees are evaluated before returning.
        progress: Show a tqdm progress bar.

    Returns:
        The root Validation, ready for ``has_errors()`` or ``and_throw()``.

    Examples:
        >>> def rules(record, v):
        ...     v.not_blank(record.get("name"), "name")
        >>> validation = validate_records([{"name": "a"}, {"name": " "}], "people", rules)
        >>> validation.context.errors_by_path()
        {'people[1].name': ['name cannot be blank']}
    """
    require(records, "records required")
    validation = Validation(label, mode=mode)
    items = tqdm(records, desc=f"Validating {label}", unit="record") if progress else records
    validation.each(items, label, rules)

    if validation.mode is EvaluationMode.DEFERRED:
        validation.validate()

    context = validation.context
    logger.info(
        "Validated %d %s records: %d errors",
        len(context.nested_contexts),
        label,
        context.error_count(),
    )
    return validation


def _frame_records(df: pd.DataFrame) -> Iterable[Mapping[str, Any]]:
    """Yield each row as a dict with missing cells mapped to None.

    Cells are mapped one by one; float columns keep NaN through ``where()``.
    """
    for _, row in df.iterrows():
        yield {
            column: None if pd.api.types.is_scalar(value) and pd.isna(value) else value
            for column, value in row.items()
        }


def validate_frame(
    df: pd.DataFrame,
    label: str,
    rules: NestedFn,
    mode: Union[EvaluationMode, str] = EvaluationMode.IMMEDIATE,
    progress: bool = False,
) -> Validation:
    """Validate every DataFrame row in its own nested scope.

    Rows are passed to ``rules`` as dicts; NaN/None cells become None so
    presence checks treat them as absent. Nested scopes are labeled with the
    row index: ``"{label}[{index}]"``.

    Raises:
        ValueError: If df is None.
    """
    require(df, "DataFrame required")
    validation = Validation(label, mode=mode)
    rows = zip(df.index, _frame_records(df))
    if progress:
        rows = tqdm(rows, total=len(df), desc=f"Validating {label}", unit="row")

    for index, record in rows:
        validation.nested(record, f"{label}[{index}]", rules)

    if validation.mode is EvaluationMode.DEFERRED:
        validation.validate()

    logger.info(
        "Validated %d %s rows: %d errors",
        len(df),
        label,
        validation.context.error_count(),
    )
    return validation


def print_report(context: ValidationContext, verbose: bool = True) -> None:
    """Print a validation tree to console.

    Displays the summary followed by the messages of every failing path.

    Args:
        context: Root of the tree to display.
        verbose: Include per-path details; summary only when False.

    Examples:
        >>> print_report(validation.context)
        Validation Summary:
          Root: user
          Scopes: 2 (1 with errors)
          Errors: 1

        Error Details:
        ❌ user.address.street
           - street must be present
    """
    if not verbose:
        print(context.summary())
        return
    print(context.to_console_summary())


__all__ = ["validate_records", "validate_frame", "print_report"]
