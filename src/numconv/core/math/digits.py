"""
Digits: alphabet, digit/value mapping and numeric display constants

Shared by the magnitude parser, the base renderer and the step narrator.

CRITICAL INVARIANTS:
1. Rendered letter digits are lowercase (uppercasing is the caller's job)
2. Fractional expansion never exceeds MAX_FRACTIONAL_DIGITS
3. Unknown digit characters map to 0, never to an exception
"""

import math
from typing import Final

# =============================================================================
# CONSTANTS
# =============================================================================

# Digit symbols for bases up to 16, in value order
DIGIT_ALPHABET: Final[str] = "0123456789abcdef"

# Hard cap on fractional digits produced by the renderer
MAX_FRACTIONAL_DIGITS: Final[int] = 10

# Decimal places used when narrating fractional values
STEP_DISPLAY_PRECISION: Final[int] = 6


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConversionFault(Exception):
    """
    Internal arithmetic fault during parsing or rendering.

    Raised for magnitudes a float cannot hold (overflow, NaN/Inf). Never
    crosses the public boundary: the orchestrator turns it into an invalid
    ConversionResult.
    """

    pass


# =============================================================================
# DIGIT MAPPING
# =============================================================================


def digit_value(char: str, base: int) -> int:
    """
    Numeric value of one digit character in the given base.

    Args:
        char: Single digit character (case-insensitive)
        base: Radix the digit belongs to

    Returns:
        Digit value, or 0 if the character is not a digit of this base

    Examples:
        >>> digit_value("f", 16)
        15
        >>> digit_value("F", 16)
        15
        >>> digit_value("8", 8)
        0
    """
    value = DIGIT_ALPHABET.find(char.lower())
    if value < 0 or value >= base:
        return 0
    return value


def digit_char(value: int) -> str:
    """
    Lowercase digit symbol for a value in 0..15.

    Raises:
        ValueError: If value is outside 0..15
    """
    if not 0 <= value < len(DIGIT_ALPHABET):
        raise ValueError(f"digit value must be in 0..15, got {value}")
    return DIGIT_ALPHABET[value]


# =============================================================================
# DECIMAL DISPLAY
# =============================================================================


def format_decimal(value: float) -> str:
    """
    Shortest decimal text for a float, without a trailing '.0'.

    Args:
        value: Finite float

    Returns:
        Decimal string

    Raises:
        ConversionFault: If value is NaN or Inf

    Examples:
        >>> format_decimal(255.0)
        '255'
        >>> format_decimal(-10.5)
        '-10.5'
        >>> format_decimal(-0.0)
        '0'
    """
    if not math.isfinite(value):
        raise ConversionFault(f"cannot display non-finite value {value}")

    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_fixed(value: float, precision: int = STEP_DISPLAY_PRECISION) -> str:
    """Fixed-point text with `precision` decimal places (narration only)."""
    return f"{value:.{precision}f}"
