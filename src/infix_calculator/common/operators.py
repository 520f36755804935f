"""Operator table shared by the converter and the evaluator."""
from enum import Enum
import math
import operator
from typing import Callable, Dict, NamedTuple


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class Associativity(str, Enum):
    """Grouping direction for operators of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


class OperatorSpec(NamedTuple):
    """Precedence, associativity and implementation of a binary operator."""

    precedence: int
    associativity: Associativity
    apply: OperatorFn


def divide(a: float, b: float) -> float:
    """
    Divide with IEEE-754 semantics instead of raising on a zero divisor.

    ``x / 0`` gives signed infinity and ``0 / 0`` gives NaN.

    :param float a: Dividend
    :param float b: Divisor

    :return: Quotient
    :rtype: float
    """
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        # The sign of a zero divisor matters: 1 / -0.0 is -inf
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# All four operators share one precedence tier, so evaluation is strictly
# left to right unless parentheses say otherwise: 2+3*4 is 20.
OPERATORS: Dict[str, OperatorSpec] = {
    "+": OperatorSpec(1, Associativity.LEFT, operator.add),
    "-": OperatorSpec(1, Associativity.LEFT, operator.sub),
    "*": OperatorSpec(1, Associativity.LEFT, operator.mul),
    "/": OperatorSpec(1, Associativity.LEFT, divide),
}


def is_operator(token: str) -> bool:
    """Return True if the token is one of the registered binary operators."""
    return token in OPERATORS
