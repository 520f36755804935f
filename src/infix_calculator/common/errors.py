"""Errors raised while converting and evaluating arithmetic expressions."""


class ExpressionSyntaxError(ValueError):
    """Raised when an infix expression cannot be converted to postfix notation."""


class EvaluationError(ValueError):
    """Raised when a postfix token stream cannot be reduced to a single value."""
