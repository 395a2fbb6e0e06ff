"""
Magnitude Parser: literal -> base-10 magnitude

Converts an already validated literal into a double-precision magnitude,
independently of the target system.

Algorithm:
    integer part: digits accumulated as an exact int, then cast to float
    fractional part: sum(digit_i / base**(i + 1)) for i = 0..n-1, left to right

Validation is the only gate: characters that are not digits of the base are
counted as 0 here instead of raising.
"""

from numconv.core.domain.conversion import ParsedMagnitude
from numconv.core.domain.numeral_system import NumeralSystem
from numconv.core.math.digits import ConversionFault, digit_value


def _resolve_system(system: NumeralSystem | str) -> NumeralSystem:
    resolved = NumeralSystem.coerce(system)
    if resolved is None:
        raise ValueError(f"unknown numeral system: {system!r}")
    return resolved


def _split(unsigned_literal: str) -> tuple[str, str]:
    """Split on the first '.'; an empty integer segment reads as '0'."""
    integer_text, _, fraction_text = unsigned_literal.partition(".")
    return integer_text or "0", fraction_text


def _digits(text: str, base: int) -> tuple[int, ...]:
    return tuple(digit_value(char, base) for char in text)


def _accumulate(digits: tuple[int, ...], base: int) -> int:
    value = 0
    for digit in digits:
        value = value * base + digit
    return value


def _magnitude(integer_part: int, fractional_digits: tuple[int, ...], base: int) -> float:
    try:
        magnitude = float(integer_part)
    except OverflowError as e:
        raise ConversionFault(
            f"integer part of {integer_part.bit_length()} bits exceeds float range"
        ) from e

    fractional_value = 0.0
    for index, digit in enumerate(fractional_digits):
        fractional_value += digit / base ** (index + 1)

    return magnitude + fractional_value


def to_decimal_magnitude(unsigned_literal: str, system: NumeralSystem | str) -> float:
    """
    Base-10 magnitude of an unsigned literal.

    Args:
        unsigned_literal: Literal without sign, e.g. '1a.f'
        system: Source numeral system

    Returns:
        Magnitude as float (>= 0)

    Raises:
        ConversionFault: If the integer part does not fit in a float
        ValueError: If system is not recognized

    Examples:
        >>> to_decimal_magnitude("1011", NumeralSystem.BINARY)
        11.0
        >>> to_decimal_magnitude("157.24", "octal")
        111.3125
        >>> to_decimal_magnitude(".8", "hexadecimal")
        0.5
    """
    base = _resolve_system(system).base
    integer_text, fraction_text = _split(unsigned_literal)

    integer_part = _accumulate(_digits(integer_text, base), base)
    return _magnitude(integer_part, _digits(fraction_text, base), base)


def parse_literal(literal: str, system: NumeralSystem | str) -> ParsedMagnitude:
    """
    Split a signed literal into sign, digits and magnitude.

    The literal is canonicalized first (trimmed, lowercased).

    Args:
        literal: Validated literal, e.g. '-1A.F'
        system: Source numeral system

    Returns:
        ParsedMagnitude for this call

    Raises:
        ConversionFault: If the integer part does not fit in a float
        ValueError: If system is not recognized
    """
    resolved = _resolve_system(system)
    base = resolved.base

    clean = literal.strip().lower()
    is_negative = clean.startswith("-")
    unsigned = clean[1:] if is_negative else clean

    integer_text, fraction_text = _split(unsigned)
    integer_digits = _digits(integer_text, base)
    fractional_digits = _digits(fraction_text, base)
    integer_part = _accumulate(integer_digits, base)

    return ParsedMagnitude(
        system=resolved,
        is_negative=is_negative,
        integer_part=integer_part,
        integer_digits=integer_digits,
        fractional_digits=fractional_digits,
        decimal_value=_magnitude(integer_part, fractional_digits, base),
    )
