"""Infix arithmetic calculator: shunting-yard conversion and postfix evaluation."""
from infix_calculator.engine.facade import evaluate_expression

__all__ = ["evaluate_expression"]
