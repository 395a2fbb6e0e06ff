"""
Base Renderer: magnitude -> digit string in a target base

Integer part:
    floor(magnitude) by repeated division, remainders read bottom to top
Fractional part:
    repeated multiplication, the integer digit of each product is taken in
    order; stops when the remainder reaches 0 or after the fractional cap

The renderer keeps the full division/multiplication trail so the step
narrator only formats values, never recomputes them.

CRITICAL INVARIANTS:
1. At most MAX_FRACTIONAL_DIGITS digits after the point
2. An explicit fractional part in the source is never dropped (renders '.0')
3. Magnitude is non-negative; the sign is only prefixed, never applied
4. Letter digits are lowercase
"""

import math
from dataclasses import dataclass

from numconv.core.domain.numeral_system import NumeralSystem
from numconv.core.math.digits import (
    MAX_FRACTIONAL_DIGITS,
    ConversionFault,
    digit_char,
)


# =============================================================================
# TRAIL RECORDS
# =============================================================================


@dataclass(frozen=True)
class DivisionRecord:
    """One step of repeated division: dividend = quotient * base + remainder."""

    dividend: int
    base: int
    quotient: int
    remainder: int


@dataclass(frozen=True)
class MultiplicationRecord:
    """One step of repeated multiplication: fraction * base = product."""

    fraction: float
    base: int
    product: float
    digit: int


@dataclass(frozen=True)
class BaseRendering:
    """Rendered literal plus the arithmetic trail that produced it."""

    text: str
    integer_digits: str
    fractional_digits: str
    is_negative: bool
    divisions: tuple[DivisionRecord, ...]
    multiplications: tuple[MultiplicationRecord, ...]


# =============================================================================
# RENDERING
# =============================================================================


def _render_integer(integer_part: int, base: int) -> tuple[str, tuple[DivisionRecord, ...]]:
    divisions: list[DivisionRecord] = []
    remainders: list[str] = []

    current = integer_part
    while current > 0:
        quotient, remainder = divmod(current, base)
        divisions.append(DivisionRecord(current, base, quotient, remainder))
        remainders.append(digit_char(remainder))
        current = quotient

    if not remainders:
        return "0", ()

    return "".join(reversed(remainders)), tuple(divisions)


def _render_fraction(
    fraction: float, base: int, max_digits: int
) -> tuple[str, tuple[MultiplicationRecord, ...]]:
    multiplications: list[MultiplicationRecord] = []
    digits: list[str] = []

    current = fraction
    while current > 0 and len(digits) < max_digits:
        product = current * base
        digit = math.floor(product)
        multiplications.append(MultiplicationRecord(current, base, product, digit))
        digits.append(digit_char(digit))
        current = product - digit

    return "".join(digits), tuple(multiplications)


def render_magnitude(
    magnitude: float,
    target_system: NumeralSystem,
    is_negative: bool = False,
    has_fractional_part: bool = False,
    max_fractional_digits: int = MAX_FRACTIONAL_DIGITS,
) -> BaseRendering:
    """
    Render a magnitude in the target base, keeping the arithmetic trail.

    Args:
        magnitude: Non-negative, finite value
        target_system: System to render in
        is_negative: Prefix '-' to the text
        has_fractional_part: Source literal had an explicit '.' segment
        max_fractional_digits: Fractional cap (1..MAX_FRACTIONAL_DIGITS)

    Returns:
        BaseRendering

    Raises:
        ConversionFault: If magnitude is NaN or Inf
        ValueError: If magnitude is negative or the cap is out of range
    """
    if not math.isfinite(magnitude):
        raise ConversionFault(f"cannot render non-finite magnitude {magnitude}")
    if magnitude < 0:
        raise ValueError(f"magnitude must be non-negative, got {magnitude}")
    if not 1 <= max_fractional_digits <= MAX_FRACTIONAL_DIGITS:
        raise ValueError(
            f"max_fractional_digits must be in 1..{MAX_FRACTIONAL_DIGITS}, "
            f"got {max_fractional_digits}"
        )

    base = target_system.base
    integer_part = math.floor(magnitude)
    fraction = magnitude - integer_part

    integer_digits, divisions = _render_integer(integer_part, base)
    text = integer_digits

    fractional_digits = ""
    multiplications: tuple[MultiplicationRecord, ...] = ()
    if fraction > 0 or has_fractional_part:
        fractional_digits, multiplications = _render_fraction(
            fraction, base, max_fractional_digits
        )
        # "5.0" stays fractional even though nothing remains to expand
        if not fractional_digits:
            fractional_digits = "0"
        text += "." + fractional_digits

    if is_negative:
        text = "-" + text

    return BaseRendering(
        text=text,
        integer_digits=integer_digits,
        fractional_digits=fractional_digits,
        is_negative=is_negative,
        divisions=divisions,
        multiplications=multiplications,
    )


def from_decimal_magnitude(
    magnitude: float,
    target_system: NumeralSystem,
    is_negative: bool = False,
    has_fractional_part: bool = False,
) -> str:
    """
    Render a magnitude as a literal of the target system.

    Examples:
        >>> from_decimal_magnitude(255.0, NumeralSystem.HEXADECIMAL)
        'ff'
        >>> from_decimal_magnitude(10.5, NumeralSystem.BINARY, is_negative=True)
        '-1010.1'
        >>> from_decimal_magnitude(5.0, NumeralSystem.BINARY, has_fractional_part=True)
        '101.0'
    """
    return render_magnitude(
        magnitude, target_system, is_negative, has_fractional_part
    ).text
