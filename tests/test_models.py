"""Test classes ExpressionRequest and EvaluationOutcome."""
from pydantic import ValidationError
import pytest

from infix_calculator.common.models import EvaluationOutcome, ExpressionRequest


def test_expression_request_valid() -> None:
    """Test that a valid ExpressionRequest keeps the raw text."""
    req = ExpressionRequest(expression=" (2+3)*4 ")
    assert req.expression == " (2+3)*4 "


def test_expression_request_invalid_type() -> None:
    """Test that non-string expressions raise a validation error."""
    with pytest.raises(ValidationError):
        # int instead of str
        ExpressionRequest(expression=123)


def test_outcome_ok() -> None:
    """Test that a successful outcome carries the value and an empty message."""
    outcome = EvaluationOutcome.ok(46.0)
    assert outcome.success is True
    assert outcome.value == 46.0
    assert outcome.message == ""


def test_outcome_failed() -> None:
    """Test that a failed outcome has a zero value."""
    outcome = EvaluationOutcome.failed("Parentheses mismatched")
    assert outcome.success is False
    assert outcome.value == 0.0
    assert outcome.message == "Parentheses mismatched"


def test_outcome_is_frozen() -> None:
    """Test that outcomes cannot be modified after creation."""
    outcome = EvaluationOutcome.ok(1.0)
    with pytest.raises(ValidationError):
        outcome.value = 2.0


def test_outcome_invalid_value_type() -> None:
    """Test that a non-numeric value raises a validation error."""
    with pytest.raises(ValidationError):
        EvaluationOutcome(success=True, value="not a float", message="")
