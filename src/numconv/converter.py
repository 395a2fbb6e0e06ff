"""Conversion Orchestrator: literal in one numeral system -> literal in another.

Composes validation, magnitude parsing, base rendering and step narration into
convert_number(). Terminal outcomes:

- REJECTED_ARGUMENTS: literal / systems missing or malformed
- REJECTED_FORMAT: literal does not match the source system's grammar
- ACCEPTED: result literal (uppercased) plus step trace
- INTERNAL_ERROR: a stage reported a fault (e.g. float overflow)

Failures are returned as invalid ConversionResult values; nothing raises
across convert_number().
"""

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from numconv.core.contracts.literal import validate_input
from numconv.core.domain.conversion import (
    ConversionOutcome,
    ConversionResult,
    ConversionStep,
    ParsedMagnitude,
)
from numconv.core.domain.numeral_system import NumeralSystem
from numconv.core.math.digits import (
    MAX_FRACTIONAL_DIGITS,
    STEP_DISPLAY_PRECISION,
    ConversionFault,
    format_decimal,
)
from numconv.core.math.magnitude import parse_literal
from numconv.core.math.rendering import BaseRendering, render_magnitude
from numconv.logging import get_logger
from numconv.narration.steps import bridging_step, from_decimal_steps, to_decimal_steps

logger = get_logger("converter")

T = TypeVar("T")

ERROR_INVALID_PARAMETERS = "Invalid input parameters"
ERROR_CONVERSION = "Conversion error occurred"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Converter configuration.

    max_fractional_digits may lower the fractional cap, never raise it.
    """

    max_fractional_digits: int = MAX_FRACTIONAL_DIGITS
    step_display_precision: int = STEP_DISPLAY_PRECISION
    narrate: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.max_fractional_digits <= MAX_FRACTIONAL_DIGITS:
            raise ValueError(
                f"max_fractional_digits must be in 1..{MAX_FRACTIONAL_DIGITS}, "
                f"got {self.max_fractional_digits}"
            )
        if self.step_display_precision < 0:
            raise ValueError(
                f"step_display_precision must be non-negative, got {self.step_display_precision}"
            )


# =============================================================================
# STAGE OUTCOME
# =============================================================================


@dataclass(frozen=True)
class StageOutcome(Generic[T]):
    """Value of a pipeline stage, or the fault that stopped it."""

    value: Optional[T] = None
    fault: str = ""

    @property
    def ok(self) -> bool:
        return not self.fault


def _attempt(stage: Callable[..., T], *args) -> StageOutcome[T]:
    try:
        return StageOutcome(value=stage(*args))
    except (ConversionFault, ArithmeticError, ValueError) as e:
        return StageOutcome(fault=f"{stage.__name__}: {type(e).__name__}: {e}")


# =============================================================================
# CONVERTER
# =============================================================================


class NumberConverter:
    """Orchestrates a conversion between two numeral systems.

    Stateless apart from its config: instances may be shared between threads.
    """

    def __init__(self, config: ConverterConfig | None = None):
        """
        Args:
            config: converter configuration (default: ConverterConfig())
        """
        self.config = config or ConverterConfig()

    def validate(self, literal: object, system: NumeralSystem | str) -> bool:
        return validate_input(literal, system)

    def convert(
        self,
        literal: object,
        from_system: NumeralSystem | str,
        to_system: NumeralSystem | str,
    ) -> ConversionResult:
        """Convert `literal` from one numeral system to another.

        Args:
            literal: source literal, e.g. '-1A.F'
            from_system: source system (member or string value)
            to_system: target system (member or string value)

        Returns:
            ConversionResult; check is_valid before reading result/steps
        """
        source = NumeralSystem.coerce(from_system)
        target = NumeralSystem.coerce(to_system)

        # 1. Arguments
        if not isinstance(literal, str) or not literal or source is None or target is None:
            logger.debug(
                "rejected arguments: literal=%r from=%r to=%r", literal, from_system, to_system
            )
            return ConversionResult.rejected(
                ConversionOutcome.REJECTED_ARGUMENTS, ERROR_INVALID_PARAMETERS
            )

        # 2. Lexical validation
        if not validate_input(literal, source):
            logger.debug("rejected format: %r is not a %s literal", literal, source.value)
            return ConversionResult.rejected(
                ConversionOutcome.REJECTED_FORMAT, f"Invalid {source.value} number format"
            )

        # 3. Magnitude
        parsed = _attempt(parse_literal, literal, source)
        if not parsed.ok:
            return self._internal_error(parsed.fault, source, target)

        # 4. Target literal
        if target == NumeralSystem.DECIMAL:
            text = _attempt(format_decimal, parsed.value.signed_value)
            if not text.ok:
                return self._internal_error(text.fault, source, target)
            final_text = text.value
            rendering = None
        else:
            rendered = _attempt(
                render_magnitude,
                parsed.value.decimal_value,
                target,
                parsed.value.is_negative,
                parsed.value.has_fractional_part,
                self.config.max_fractional_digits,
            )
            if not rendered.ok:
                return self._internal_error(rendered.fault, source, target)
            final_text = rendered.value.text
            rendering = rendered.value

        # 5. Narration
        steps: list[ConversionStep] = []
        if self.config.narrate:
            narrated = _attempt(self._narrate, parsed.value, target, rendering)
            if not narrated.ok:
                return self._internal_error(narrated.fault, source, target)
            steps = narrated.value

        return ConversionResult.accepted(final_text.upper(), steps)

    def _narrate(
        self,
        parsed: ParsedMagnitude,
        target: NumeralSystem,
        rendering: BaseRendering | None,
    ) -> list[ConversionStep]:
        """Trace in derivation order: to-decimal, bridge, from-decimal."""
        precision = self.config.step_display_precision
        from_decimal = parsed.system == NumeralSystem.DECIMAL

        steps: list[ConversionStep] = []
        if not from_decimal:
            steps.extend(to_decimal_steps(parsed, precision))

        if rendering is not None:
            if not from_decimal:
                steps.append(bridging_step(parsed, target, rendering))
            steps.extend(
                from_decimal_steps(parsed.decimal_value, rendering, target, precision)
            )

        return steps

    def _internal_error(
        self, fault: str, source: NumeralSystem, target: NumeralSystem
    ) -> ConversionResult:
        logger.warning(
            "conversion %s -> %s failed: %s", source.value, target.value, fault
        )
        return ConversionResult.rejected(ConversionOutcome.INTERNAL_ERROR, ERROR_CONVERSION)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_CONVERTER = NumberConverter()


def convert_number(
    literal: object,
    from_system: NumeralSystem | str,
    to_system: NumeralSystem | str,
) -> ConversionResult:
    """Convert with the default configuration.

    Examples:
        >>> convert_number("11", "decimal", "binary").result
        '1011'
        >>> convert_number("-10", "decimal", "hexadecimal").result
        '-A'
        >>> convert_number("", "decimal", "binary").error
        'Invalid input parameters'
    """
    return _DEFAULT_CONVERTER.convert(literal, from_system, to_system)
