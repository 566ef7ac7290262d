"""Tests for the deferred (declare-then-run) evaluation discipline."""

import pytest
from conftest import person_rules

from scoped_validation.core.enums import EvaluationMode
from scoped_validation.validation import Validation, ValidationException
from scoped_validation.validation.models import ValidationError
from scoped_validation.validation.validators import PredicateValidator


@pytest.fixture
def deferred():
    return Validation("user", mode=EvaluationMode.DEFERRED)


def test_mode_accepts_string_value():
    assert Validation("user", mode="deferred").mode is EvaluationMode.DEFERRED


def test_checks_are_registered_not_evaluated(deferred):  # pylint: disable=redefined-outer-name
    deferred.presence(None, "name").greater_than(1, 5, "age")

    assert deferred.context.errors == []
    assert len(deferred.context.validators) == 2
    assert deferred.has_errors() is False


def test_validate_evaluates_in_declaration_order(deferred):  # pylint: disable=redefined-outer-name
    deferred.presence(None, "c1").presence("ok", "c2").presence(None, "c3")

    context = deferred.validate()

    assert context is deferred.context
    assert [e.label for e in context.errors] == ["c1", "c3"]
    assert context.evaluated is True


def test_predicate_is_deferred(deferred):  # pylint: disable=redefined-outer-name
    calls = []

    def predicate():
        calls.append(1)
        return ValidationError("x", "custom.key", "x is wrong")

    deferred.is_valid(predicate)

    assert calls == []
    assert isinstance(deferred.context.validators[0], PredicateValidator)
    deferred.validate()
    assert [e.key for e in deferred.context.errors] == ["custom.key"]


def test_nested_scopes_are_evaluated_recursively(deferred, invalid_person):  # pylint: disable=redefined-outer-name
    person_rules(invalid_person, deferred)
    assert deferred.has_errors() is False

    deferred.validate()

    assert deferred.context.errors_by_path() == {
        "name": ["name cannot be blank"],
        "address.street": ["street cannot be blank"],
        "phones[1].number": ["number cannot be blank"],
    }


def test_validate_twice_raises(deferred):  # pylint: disable=redefined-outer-name
    deferred.presence(None, "name")
    deferred.validate()
    with pytest.raises(RuntimeError):
        deferred.validate()
    assert len(deferred.context.errors) == 1


def test_no_declaration_after_evaluation(deferred):  # pylint: disable=redefined-outer-name
    deferred.validate()
    with pytest.raises(RuntimeError):
        deferred.presence("x", "name")
    with pytest.raises(RuntimeError):
        deferred.is_valid(lambda: None)
    with pytest.raises(RuntimeError):
        deferred.nested("x", "child", lambda value, v: None)


def test_and_throw_evaluates_pending_tree(deferred):  # pylint: disable=redefined-outer-name
    deferred.presence(None, "name")
    with pytest.raises(ValidationException) as exc_info:
        deferred.and_throw()
    assert exc_info.value.context is deferred.context
    assert deferred.context.evaluated is True


def test_and_throw_after_validate(deferred):  # pylint: disable=redefined-outer-name
    deferred.presence("x", "name")
    deferred.validate()
    deferred.and_throw()


def test_merge_evaluated_tree_is_not_evaluated_again(deferred):  # pylint: disable=redefined-outer-name
    other = Validation("other", mode=EvaluationMode.DEFERRED).presence(None, "x")
    other.validate()
    deferred.merge(other)

    deferred.validate()

    assert len(other.context.errors) == 1
    assert deferred.has_errors() is True


def test_merge_pending_tree_is_evaluated_with_root(deferred):  # pylint: disable=redefined-outer-name
    other = Validation("other", mode=EvaluationMode.DEFERRED).presence(None, "x")
    deferred.merge(other)

    deferred.validate()

    assert [e.label for e in other.context.errors] == ["x"]
    assert other.context.evaluated is True


def test_immediate_tree_merged_into_deferred_root(deferred):  # pylint: disable=redefined-outer-name
    other = Validation("other").presence(None, "x")
    deferred.merge(other)
    deferred.validate()
    assert deferred.context.error_count() == 1


def test_deferred_tree_merged_into_immediate_root_raises():
    root = Validation("user")
    other = Validation("other", mode=EvaluationMode.DEFERRED).presence(None, "x")
    root.merge(other)

    with pytest.raises(ValidationException) as exc_info:
        root.and_throw()

    assert exc_info.value.context is root.context
    assert [e.label for e in other.context.errors] == ["x"]
    assert other.context.evaluated is True
    assert root.context.evaluated is False


def test_deferred_nested_scope_merged_into_immediate_root_raises():
    other = Validation("other", mode=EvaluationMode.DEFERRED)
    other.nested(None, "inner", lambda value, v: v.presence(value, "x"))
    root = Validation("user").merge(other)

    with pytest.raises(ValidationException):
        root.and_throw()

    assert root.context.errors_by_path() == {"other.inner.x": ["x must be present"]}
