"""
Step Narrator: human-readable trace of a conversion

Formats values already derived by the magnitude parser and the base renderer.
Two families mirror the two directions of a conversion:

    to-decimal:   positional expansion of the source digits
    from-decimal: repeated division / multiplication by the target base

Narration letters are lowercase (e.g. 'remainder f'); only the final
'Final result:' line repeats the uppercased literal.
"""

import math

from numconv.core.domain.conversion import ConversionStep, ParsedMagnitude
from numconv.core.domain.numeral_system import NumeralSystem
from numconv.core.math.digits import (
    STEP_DISPLAY_PRECISION,
    digit_char,
    format_decimal,
    format_fixed,
)
from numconv.core.math.rendering import BaseRendering


def _signed(text: str, is_negative: bool) -> str:
    return f"-{text}" if is_negative else text


def _unsigned_literal(parsed: ParsedMagnitude) -> str:
    text = "".join(digit_char(d) for d in parsed.integer_digits)
    if parsed.has_fractional_part:
        text += "." + "".join(digit_char(d) for d in parsed.fractional_digits)
    return text


# =============================================================================
# TO-DECIMAL
# =============================================================================


def to_decimal_steps(
    parsed: ParsedMagnitude, precision: int = STEP_DISPLAY_PRECISION
) -> list[ConversionStep]:
    """
    Steps explaining source literal -> decimal.

    Order: [negative sign], integer expansion, then either
    (fractional expansion, sum of parts) or a final-result step.
    """
    base = parsed.system.base
    steps: list[ConversionStep] = []

    if parsed.is_negative:
        steps.append(
            ConversionStep(
                label="Handle negative sign",
                calculation=f"Input is negative: -{_unsigned_literal(parsed)}",
                result="Keep the negative sign for final result",
            )
        )

    width = len(parsed.integer_digits)
    terms = [
        f"{digit_char(digit).upper()} × {base}^{width - 1 - index}"
        for index, digit in enumerate(parsed.integer_digits)
    ]
    # Positional values listed from the least significant digit
    values = [
        digit * base**power
        for power, digit in enumerate(reversed(parsed.integer_digits))
    ]
    steps.append(
        ConversionStep(
            label="Convert integer part - multiply each digit by its position value",
            calculation=" + ".join(terms),
            result=" + ".join(str(v) for v in values) + f" = {sum(values)}",
        )
    )

    decimal_text = _signed(format_decimal(parsed.decimal_value), parsed.is_negative)

    if parsed.has_fractional_part:
        frac_terms = [
            f"{digit_char(digit).upper()} × {base}^{-(index + 1)}"
            for index, digit in enumerate(parsed.fractional_digits)
        ]
        frac_values = [
            digit / base ** (index + 1)
            for index, digit in enumerate(parsed.fractional_digits)
        ]
        steps.append(
            ConversionStep(
                label="Convert fractional part - multiply each digit by negative powers",
                calculation=" + ".join(frac_terms),
                result=" + ".join(format_fixed(v, precision) for v in frac_values)
                + f" = {format_fixed(sum(frac_values), precision)}",
            )
        )

        whole = math.floor(parsed.decimal_value)
        steps.append(
            ConversionStep(
                label="Add integer and fractional parts",
                calculation=f"{whole} + {format_fixed(parsed.decimal_value - whole, precision)}",
                result=decimal_text,
            )
        )
    else:
        steps.append(
            ConversionStep(
                label="Final result",
                calculation=f"{parsed.system.value} to decimal conversion",
                result=decimal_text,
            )
        )

    return steps


# =============================================================================
# BRIDGE
# =============================================================================


def bridging_step(
    parsed: ParsedMagnitude, target_system: NumeralSystem, rendering: BaseRendering
) -> ConversionStep:
    """Explicit decimal -> target hop between the two families."""
    return ConversionStep(
        label=f"Convert decimal to {target_system.value}",
        calculation=(
            f"{_signed(format_decimal(parsed.decimal_value), parsed.is_negative)}"
            f" → {target_system.value}"
        ),
        result=rendering.text,
    )


# =============================================================================
# FROM-DECIMAL
# =============================================================================


def from_decimal_steps(
    magnitude: float,
    rendering: BaseRendering,
    target_system: NumeralSystem,
    precision: int = STEP_DISPLAY_PRECISION,
) -> list[ConversionStep]:
    """
    Steps explaining decimal -> target literal.

    Order: [negative number], [divisions], [multiplications], combine.
    Divisions appear only for a positive integer part, multiplications only
    for a positive fractional remainder.
    """
    base = target_system.base
    steps: list[ConversionStep] = []

    if rendering.is_negative:
        steps.append(
            ConversionStep(
                label="Handle negative number",
                calculation=f"Working with absolute value: {format_decimal(magnitude)}",
                result="Will add negative sign to final result",
            )
        )

    if rendering.divisions:
        steps.append(
            ConversionStep(
                label=f"Convert integer part - divide by {base} repeatedly",
                calculation="\n".join(
                    f"{d.dividend} ÷ {d.base} = {d.quotient} "
                    f"remainder {digit_char(d.remainder)}"
                    for d in rendering.divisions
                ),
                result="Read remainders from bottom to top for integer part",
            )
        )

    if rendering.multiplications:
        digits = "".join(digit_char(m.digit) for m in rendering.multiplications)
        steps.append(
            ConversionStep(
                label=f"Convert fractional part - multiply by {base} repeatedly",
                calculation="\n".join(
                    f"{format_fixed(m.fraction, precision)} × {m.base} = "
                    f"{format_fixed(m.product, precision)} → digit: {digit_char(m.digit)}"
                    for m in rendering.multiplications
                ),
                result=f"Take integer parts in order: 0.{digits}",
            )
        )

    unsigned_text = rendering.text.removeprefix("-")
    steps.append(
        ConversionStep(
            label="Combine results",
            calculation=(
                f"Add negative sign: -{unsigned_text}"
                if rendering.is_negative
                else unsigned_text
            ),
            result=f"Final result: {rendering.text.upper()}",
        )
    )

    return steps
