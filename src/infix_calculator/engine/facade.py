"""Single entry point turning a raw expression into an evaluation outcome."""
import math

from infix_calculator.common.errors import EvaluationError, ExpressionSyntaxError
from infix_calculator.common.logger import logger
from infix_calculator.common.models import EvaluationOutcome
from infix_calculator.engine.converter import ShuntingYard
from infix_calculator.engine.evaluator import INVALID_EXPRESSION, PostfixEvaluator


def evaluate_expression(expression: str) -> EvaluationOutcome:
    """
    Convert and evaluate an infix expression, reporting failures as data.

    Nothing raised by the conversion or the evaluation escapes: the error text
    becomes the outcome message and the value is 0.

    :param str expression: Raw infix expression, as typed by the user

    :return: Outcome with success flag, value and message
    :rtype: EvaluationOutcome
    """
    try:
        postfix: str = ShuntingYard.to_postfix(expression)
        value: float = PostfixEvaluator.evaluate(postfix)
    except (ExpressionSyntaxError, EvaluationError) as exc:
        logger.info(f"Could not evaluate {expression!r}: {exc}")
        return EvaluationOutcome.failed(str(exc))

    if math.isnan(value):
        logger.info(f"Expression {expression!r} is not a number")
        return EvaluationOutcome.failed(INVALID_EXPRESSION)

    return EvaluationOutcome.ok(value)
