"""Evaluate postfix token streams produced by the converter."""
import math
from typing import List

from infix_calculator.common.errors import EvaluationError
from infix_calculator.common.logger import logger
from infix_calculator.common.operators import OPERATORS
from infix_calculator.common.stack import Stack
from infix_calculator.engine.converter import DIGITS, MARKER


INVALID_EXPRESSION: str = "Invalid Expression"


class PostfixEvaluator:
    """
    Reduce a marked postfix token stream to a single number using a stack.

    A marker starts an operand whose digits follow it, possibly separated by
    spaces: "_ 1 2" is the single operand 12. The operand ends at the next
    marker, the next operator, or the end of the stream.

    Examples:
        - Postfix stream: _ 1 2 _ 3 4 +
        - Result: 46.0
    """

    @staticmethod
    def _to_number(text: str) -> float:
        """
        Convert an accumulated operand to a float.

        :param str text: Operand characters

        :return: Numeric value
        :rtype: float
        :raises EvaluationError: If the text is empty or not a run of ASCII digits
        """
        if not text:
            # A marker followed directly by an operator carries no number
            raise EvaluationError(INVALID_EXPRESSION)
        if not (text.isascii() and text.isdigit()):
            raise EvaluationError(f"Invalid operand: {text!r}")
        return float(text)

    @staticmethod
    def evaluate(postfix: str) -> float:
        """
        Evaluate a postfix token stream.

        :param str postfix: Space-delimited postfix stream, as built by the converter

        :return: Computed result, NaN if the stream holds no value at all
        :rtype: float
        :raises EvaluationError: On missing operands, leftover operands or a bad operand
        """
        stack: Stack[float] = Stack()
        digits: List[str] = []
        in_operand: bool = False

        for ch in postfix:
            if ch.isspace():
                continue

            is_operator: bool = ch in OPERATORS

            if ch == MARKER:
                # A new marker closes the operand being built
                if digits:
                    stack.push(PostfixEvaluator._to_number("".join(digits)))
                digits = []
                in_operand = True
                continue

            if in_operand:
                if not is_operator:
                    digits.append(ch)
                    continue
                stack.push(PostfixEvaluator._to_number("".join(digits)))
                digits = []
                in_operand = False

            if ch in DIGITS:
                stack.push(float(ch))
            elif is_operator:
                try:
                    b: float = stack.pop()
                    a: float = stack.pop()
                except IndexError as exc:
                    raise EvaluationError(INVALID_EXPRESSION) from exc
                stack.push(OPERATORS[ch].apply(a, b))
            else:
                logger.debug("Ignoring stray character %r in postfix stream", ch)

        # A stream without operators ends inside its only operand
        if digits:
            stack.push(PostfixEvaluator._to_number("".join(digits)))

        if len(stack) > 1:
            leftover = ", ".join(f"{value:g}" for value in stack)
            raise EvaluationError(f"Invalid expression (remaining operands): {postfix}, stack: {leftover}")

        result: float = stack.pop() if stack else math.nan
        logger.debug("Evaluated postfix %r to %s", postfix, result)
        return result


def evaluate_postfix(postfix: str) -> float:
    """Shortcut for :meth:`PostfixEvaluator.evaluate`."""
    return PostfixEvaluator.evaluate(postfix)
