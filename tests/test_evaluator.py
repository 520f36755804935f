"""Test class PostfixEvaluator."""
import math

import pytest

from infix_calculator.common.errors import EvaluationError
from infix_calculator.engine.evaluator import PostfixEvaluator, evaluate_postfix


@pytest.mark.parametrize("postfix,expected", [
    ("_ 2 _ 3 +", 5.0),
    ("_ 1 2 _ 3 4 +", 46.0),
    ("_ 1 0 _ 4 -", 6.0),
    ("_ 8 _ 2 /", 4.0),
    ("_ 7 _ 2 /", 3.5),
    ("_ 2 _ 3 + _ 4 *", 20.0),
    ("_ 2 5 _ 3 4 * _ 2 3 _ 1 + -", 826.0),
    # Unmarked single digits are operands on their own
    ("3 4 +", 7.0),
    ("_ 4 2", 42.0),
])
def test_evaluate_valid(postfix, expected):
    """Evaluate returns the expected value for well-formed streams."""
    assert PostfixEvaluator.evaluate(postfix) == expected


def test_operand_order_for_subtraction_and_division():
    """The first popped value is the right-hand operand."""
    assert evaluate_postfix("_ 2 _ 1 0 -") == -8.0
    assert evaluate_postfix("_ 1 _ 4 /") == 0.25


@pytest.mark.parametrize("postfix", ["_ 2 +", "+", "_ 1 _ 2 + *"])
def test_missing_operands(postfix):
    """An operator without two operands raises EvaluationError instead of IndexError."""
    with pytest.raises(EvaluationError, match="Invalid Expression"):
        PostfixEvaluator.evaluate(postfix)


@pytest.mark.parametrize("postfix", ["_ 2 _ 3", "_ 1 _ 2 _ 3 +"])
def test_remaining_operands(postfix):
    """More than one value left on the stack raises EvaluationError."""
    with pytest.raises(EvaluationError, match="remaining operands"):
        PostfixEvaluator.evaluate(postfix)


def test_non_numeric_operand():
    """A marked run that is not made of digits is rejected."""
    with pytest.raises(EvaluationError) as exc_info:
        PostfixEvaluator.evaluate("_ a b _ 1 +")
    assert str(exc_info.value) == "Invalid operand: 'ab'"


@pytest.mark.parametrize("postfix", ["_ +", "_ _ +", "_ 1 _ -"])
def test_marker_without_digits(postfix):
    """A marker directly followed by an operator is an invalid expression, not an empty operand."""
    with pytest.raises(EvaluationError) as exc_info:
        PostfixEvaluator.evaluate(postfix)
    assert str(exc_info.value) == "Invalid Expression"


def test_empty_stream_is_nan():
    """An empty stream has no value and evaluates to NaN."""
    assert math.isnan(PostfixEvaluator.evaluate(""))


def test_division_by_zero_follows_ieee():
    """Division by zero gives infinity, and zero by zero gives NaN."""
    assert evaluate_postfix("_ 1 _ 0 /") == math.inf
    assert math.isnan(evaluate_postfix("_ 0 _ 0 /"))
