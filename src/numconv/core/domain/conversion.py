"""
Conversion value types: parsed magnitude, step trace and final result

ParsedMagnitude is transient (lives for one conversion call).
ConversionStep and ConversionResult are immutable Pydantic models and form the
only artifact handed to collaborators.

INVARIANTS (ConversionResult):
1. is_valid  => error is None and result is non-empty
2. not is_valid => steps empty, result empty, error present
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from numconv.core.domain.numeral_system import NumeralSystem


# =============================================================================
# ENUMS
# =============================================================================


class ConversionOutcome(str, Enum):
    """Terminal state of a conversion call"""

    ACCEPTED = "ACCEPTED"
    REJECTED_ARGUMENTS = "REJECTED_ARGUMENTS"
    REJECTED_FORMAT = "REJECTED_FORMAT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# PARSED MAGNITUDE
# =============================================================================


@dataclass(frozen=True)
class ParsedMagnitude:
    """
    A validated literal split into sign, digits and base-10 value.

    integer_digits are most-significant first; fractional_digits keep the
    input digit count (trailing zeros included).
    """

    system: NumeralSystem
    is_negative: bool
    integer_part: int
    integer_digits: tuple[int, ...]
    fractional_digits: tuple[int, ...]
    decimal_value: float

    @property
    def has_fractional_part(self) -> bool:
        """True if the literal carried an explicit '.' segment."""
        return len(self.fractional_digits) > 0

    @property
    def signed_value(self) -> float:
        return -self.decimal_value if self.is_negative else self.decimal_value


# =============================================================================
# STEP TRACE
# =============================================================================


class ConversionStep(BaseModel):
    """One narrated stage of a conversion."""

    label: str = Field(..., min_length=1, description="Stage being performed")
    calculation: str = Field(..., description="Arithmetic performed at this stage")
    result: str = Field(..., description="Outcome of this stage")

    model_config = {"frozen": True}


# =============================================================================
# CONVERSION RESULT
# =============================================================================


class ConversionResult(BaseModel):
    """
    Outcome of convert_number.

    Failures are values, not exceptions: callers must check is_valid before
    reading result or steps.
    """

    result: str = Field("", description="Target-system literal, letters uppercased")
    steps: tuple[ConversionStep, ...] = Field(
        default_factory=tuple, description="Ordered step trace"
    )
    is_valid: bool = Field(..., description="True if the conversion succeeded")
    error: Optional[str] = Field(None, description="Failure message (invalid only)")
    outcome: ConversionOutcome = Field(
        ConversionOutcome.ACCEPTED, description="Terminal state that produced this result"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "ConversionResult":
        """Valid results carry a literal and no error; invalid ones carry only an error."""
        if self.is_valid:
            if self.error is not None:
                raise ValueError("valid result must not carry an error")
            if not self.result:
                raise ValueError("valid result must carry a non-empty literal")
            if self.outcome != ConversionOutcome.ACCEPTED:
                raise ValueError(f"valid result cannot have outcome {self.outcome.value}")
        else:
            if not self.error:
                raise ValueError("invalid result must carry an error message")
            if self.result or self.steps:
                raise ValueError("invalid result must have empty result and steps")
            if self.outcome == ConversionOutcome.ACCEPTED:
                raise ValueError("invalid result cannot have outcome ACCEPTED")
        return self

    @classmethod
    def accepted(cls, result: str, steps: list[ConversionStep]) -> "ConversionResult":
        return cls(result=result, steps=tuple(steps), is_valid=True)

    @classmethod
    def rejected(cls, outcome: ConversionOutcome, error: str) -> "ConversionResult":
        return cls(is_valid=False, error=error, outcome=outcome)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict matching contracts/schema/conversion_result.json."""
        return self.model_dump(mode="json")
