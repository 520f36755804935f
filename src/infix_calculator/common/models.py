"""Pydantic models for expression requests and evaluation outcomes."""
from pydantic import BaseModel, ConfigDict, Field


class ExpressionRequest(BaseModel):
    """Represents a single raw expression submitted for evaluation."""

    expression: str = Field(..., description="Infix arithmetic expression, verbatim")


class EvaluationOutcome(BaseModel):
    """Uniform result of evaluating an expression: a value on success, a message on failure."""

    # Outcomes are handed to the caller and never changed afterwards
    model_config = ConfigDict(frozen=True)

    success: bool = Field(..., description="Whether the expression evaluated to a number")
    value: float = Field(default=0.0, description="Evaluated value, 0 on failure")
    message: str = Field(default="", description="Error text on failure, empty on success")

    @classmethod
    def ok(cls, value: float) -> "EvaluationOutcome":
        """Build a successful outcome."""
        return cls(success=True, value=value, message="")

    @classmethod
    def failed(cls, message: str) -> "EvaluationOutcome":
        """Build a failed outcome with a zero value."""
        return cls(success=False, value=0.0, message=message)
