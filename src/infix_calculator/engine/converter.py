"""Convert infix arithmetic expressions to postfix notation."""
import re
from typing import List

from infix_calculator.common.errors import ExpressionSyntaxError
from infix_calculator.common.logger import logger
from infix_calculator.common.operators import OPERATORS, Associativity
from infix_calculator.common.stack import Stack


# Prefix placed in front of every run of word characters
MARKER: str = "_"

# ASCII only: non-ASCII letters and digits are reported as unknown tokens
_WORD_RUN = re.compile(r"\w+", re.ASCII)
DIGITS: str = "0123456789"


class ShuntingYard:
    """
    Convert an infix expression to Reverse Polish Notation (RPN) with the Shunting-yard algorithm.

    Algorithm:
        1. Put a marker in front of each run of word characters, so that a
           multi-digit number survives being scanned one character at a time
        2. Scan the marked string; digits and markers go straight to the output,
           operators and parentheses are buffered on a stack
        3. Join the output with single spaces

    Examples:
        - Infix expression: 25*34-(23+1)
        - Marked expression: _25*_34-(_23+_1)
        - Postfix stream: _ 2 5 _ 3 4 * _ 2 3 _ 1 + -
    """

    @staticmethod
    def mark_digit_runs(expr: str) -> str:
        """
        Insert the marker before each maximal run of word characters.

        :param str expr: Raw infix expression

        :return: Marked expression, e.g. "_12+_34" for "12+34"
        :rtype: str
        """
        return _WORD_RUN.sub(lambda match: MARKER + match.group(0), expr)

    @staticmethod
    def _should_pop(current: str, top: str) -> bool:
        """
        Decide whether the operator on top of the stack leaves before the current one is pushed.

        :param str current: Operator being scanned
        :param str top: Entry on top of the operator stack

        :return: True if the stack top must be moved to the output
        :rtype: bool
        """
        if top not in OPERATORS:
            # Parentheses stay on the stack
            return False
        cur_spec = OPERATORS[current]
        top_prec = OPERATORS[top].precedence
        if cur_spec.associativity is Associativity.LEFT:
            return cur_spec.precedence <= top_prec
        return cur_spec.precedence < top_prec

    @staticmethod
    def to_postfix(expr: str) -> str:
        """
        Convert an infix expression into a space-delimited postfix token stream.

        :param str expr: Raw infix expression

        :return: Postfix stream with markers, e.g. "_ 1 2 _ 3 4 +"
        :rtype: str
        :raises ExpressionSyntaxError: On an unknown character or mismatched parentheses
        """
        marked: str = ShuntingYard.mark_digit_runs(expr)
        output: List[str] = []
        stack: Stack[str] = Stack()

        for ch in marked:
            if ch.isspace():
                continue

            if ch in DIGITS or ch == MARKER:
                # Operands go straight to the output
                output.append(ch)
            elif ch in OPERATORS:
                while stack and ShuntingYard._should_pop(ch, stack.peek()):
                    output.append(stack.pop())
                stack.push(ch)
            elif ch == "(":
                stack.push(ch)
            elif ch == ")":
                found_left_paren = False
                while stack:
                    top = stack.pop()
                    if top == "(":
                        found_left_paren = True
                        break
                    output.append(top)
                if not found_left_paren:
                    raise ExpressionSyntaxError("Parentheses mismatched")
            else:
                raise ExpressionSyntaxError(f"Unknown token: {ch}")

        # Flush the remaining operators, top of the stack first
        while stack:
            top = stack.pop()
            if top in "()":
                # An opening parenthesis was never closed
                raise ExpressionSyntaxError("Parentheses mismatched")
            output.append(top)

        postfix = " ".join(output)
        logger.debug("Converted %r to postfix %r", expr, postfix)
        return postfix


def convert_infix_to_postfix(expression: str) -> str:
    """Shortcut for :meth:`ShuntingYard.to_postfix`."""
    return ShuntingYard.to_postfix(expression)
