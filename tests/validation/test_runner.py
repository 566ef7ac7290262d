"""Unit tests for batch validation and console reporting."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pandas as pd
import pytest

from scoped_validation.core.enums import EvaluationMode
from scoped_validation.validation import Validation
from scoped_validation.validation.runner import print_report, validate_frame, validate_records


def record_rules(record, v: Validation) -> None:
    """Rules for a plain dict record."""
    v.not_blank(record.get("name"), "name").presence(record.get("age"), "age")
    if record.get("age") is not None:
        v.greater_than_or_equal_to(record["age"], 0, "age")


@pytest.fixture
def records():
    return [
        {"name": "Ada", "age": 36},
        {"name": " ", "age": 41},
        {"name": "Grace", "age": None},
    ]


@pytest.fixture
def people_df():
    return pd.DataFrame(
        {"name": ["Ada", None, "Grace"], "age": [36.0, 41.0, float("nan")]},
        index=[10, 11, 12],
    )


def test_validate_records(records):  # pylint: disable=redefined-outer-name
    validation = validate_records(records, "people", record_rules)

    context = validation.context
    assert context.label == "people"
    assert [c.label for c in context.nested_contexts] == ["people[0]", "people[1]", "people[2]"]
    assert context.errors_by_path() == {
        "people[1].name": ["name cannot be blank"],
        "people[2].age": ["age must be present"],
    }


@pytest.mark.parametrize("mode", [EvaluationMode.IMMEDIATE, EvaluationMode.DEFERRED])
def test_validate_records_same_result_in_both_modes(records, mode):  # pylint: disable=redefined-outer-name
    validation = validate_records(records, "people", record_rules, mode=mode)
    assert validation.mode is mode
    assert validation.context.error_count() == 2


def test_validate_records_deferred_tree_is_evaluated(records):  # pylint: disable=redefined-outer-name
    validation = validate_records(records, "people", record_rules, mode="deferred")
    assert validation.context.evaluated is True
    assert validation.has_errors() is True


def test_validate_records_requires_records():
    with pytest.raises(ValueError, match="records required"):
        validate_records(None, "people", record_rules)


def test_validate_records_progress_uses_tqdm(records):  # pylint: disable=redefined-outer-name
    with patch("scoped_validation.validation.runner.tqdm", side_effect=lambda it, **kw: it) as bar:
        validate_records(records, "people", record_rules, progress=True)
    bar.assert_called_once()
    assert bar.call_args.kwargs["desc"] == "Validating people"


def test_validate_records_logs_counts(records, caplog):  # pylint: disable=redefined-outer-name
    with caplog.at_level(logging.INFO, logger="scoped_validation.validation.runner"):
        validate_records(records, "people", record_rules)
    assert "Validated 3 people records: 2 errors" in caplog.text


def test_validate_frame_maps_missing_cells_to_none(people_df):  # pylint: disable=redefined-outer-name
    seen = []

    def rules(record, v):
        seen.append(record)
        record_rules(record, v)

    validation = validate_frame(people_df, "people", rules)

    assert seen[1]["name"] is None
    assert seen[2]["age"] is None
    assert [c.label for c in validation.context.nested_contexts] == [
        "people[10]",
        "people[11]",
        "people[12]",
    ]
    assert validation.context.errors_by_path() == {
        "people[11].name": ["name cannot be blank"],
        "people[12].age": ["age must be present"],
    }


def test_validate_frame_maps_missing_cells_of_any_dtype():
    df = pd.DataFrame(
        {
            "score": [1.5, float("nan")],
            "joined": pd.to_datetime(["2024-01-01", None]),
            "tags": [["a"], []],
        }
    )
    seen = []

    validate_frame(df, "rows", lambda record, v: seen.append(record))

    assert seen[0]["score"] == 1.5
    assert seen[1]["score"] is None
    assert seen[1]["joined"] is None
    assert seen[0]["tags"] == ["a"]
    assert seen[1]["tags"] == []


def test_validate_frame_deferred(people_df):  # pylint: disable=redefined-outer-name
    validation = validate_frame(people_df, "people", record_rules, mode=EvaluationMode.DEFERRED)
    assert validation.context.evaluated is True
    assert validation.context.error_count() == 2


def test_validate_frame_progress(people_df):  # pylint: disable=redefined-outer-name
    with patch("scoped_validation.validation.runner.tqdm", side_effect=lambda it, **kw: it) as bar:
        validate_frame(people_df, "people", record_rules, progress=True)
    assert bar.call_args.kwargs["total"] == 3


def test_validate_frame_requires_frame():
    with pytest.raises(ValueError, match="DataFrame required"):
        validate_frame(None, "people", record_rules)


def test_print_report(records, capsys):  # pylint: disable=redefined-outer-name
    validation = validate_records(records, "people", record_rules)

    print_report(validation.context)

    out = capsys.readouterr().out
    assert "Validation Summary:" in out
    assert "❌ people.people[1].name" in out
    assert "   - age must be present" in out


def test_print_report_summary_only(records, capsys):  # pylint: disable=redefined-outer-name
    validation = validate_records(records, "people", record_rules)

    print_report(validation.context, verbose=False)

    out = capsys.readouterr().out
    assert "Errors: 2" in out
    assert "Error Details:" not in out
