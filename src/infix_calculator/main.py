"""
Command line entrypoint.

Evaluates the expressions given as arguments and prints one result per line.
A failed expression prints its error message instead of a value, and the exit
status is 1 if any expression failed.
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from infix_calculator.common.logger import configure_logging
from infix_calculator.common.models import EvaluationOutcome, ExpressionRequest
from infix_calculator.engine.facade import evaluate_expression


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions to evaluate, at least one.
    verbose : bool
        Enable debug logging.
    """

    expressions: List[str] = Field(..., min_length=1)
    verbose: bool = False


def format_value(value: float) -> str:
    """Render a value without a trailing '.0' for whole numbers."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="infix-calculator",
        description="Evaluate infix arithmetic expressions (evaluated strictly left to right)",
    )
    parser.add_argument("expressions", nargs="*", help="Expressions to evaluate, e.g. '(2+3)*4'")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        return CliArgs(expressions=args.expressions, verbose=args.verbose)
    except ValidationError as exc:
        parser.error(str(exc))


def print_outcome(outcome: EvaluationOutcome) -> None:
    """Print a value on stdout, or the failure message on stderr."""
    if outcome.success:
        print(format_value(outcome.value))
    else:
        print(f"error: {outcome.message}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function of the ``infix-calculator`` console script.

    :param argv: Arguments without the program name
    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    logger = configure_logging(cli_args.verbose)

    requests = [ExpressionRequest(expression=expr) for expr in cli_args.expressions]
    outcomes = [evaluate_expression(request.expression) for request in requests]
    for outcome in outcomes:
        print_outcome(outcome)

    all_ok = all(outcome.success for outcome in outcomes)
    logger.debug(f"Exiting with status {0 if all_ok else 1}")
    return 0 if all_ok else 1


if __name__ == "__main__":
    sys.exit(main())
