"""
Literal Validator

Checks that a literal's lexical shape matches its claimed source system:

    ^-?D+(?:\\.D+)?$    with D the digit class of the system

Input is trimmed and lowercased before matching, so hexadecimal letters are
case-insensitive. Pure predicate.
"""

import re
from typing import Final

from numconv.core.domain.numeral_system import NumeralSystem


_DIGIT_CLASSES: Final[dict[NumeralSystem, str]] = {
    NumeralSystem.BINARY: "[01]",
    NumeralSystem.OCTAL: "[0-7]",
    NumeralSystem.DECIMAL: "[0-9]",
    NumeralSystem.HEXADECIMAL: "[0-9a-f]",
}

LITERAL_PATTERNS: Final[dict[NumeralSystem, re.Pattern[str]]] = {
    system: re.compile(rf"^-?{digits}+(?:\.{digits}+)?$")
    for system, digits in _DIGIT_CLASSES.items()
}


def validate_input(literal: object, system: NumeralSystem | str) -> bool:
    """
    Whether `literal` is a well-formed number of `system`.

    Args:
        literal: Candidate literal (non-strings are rejected)
        system: NumeralSystem member or its string value

    Returns:
        False for blank input, unknown systems and out-of-alphabet digits

    Examples:
        >>> validate_input("-1A.F", "hexadecimal")
        True
        >>> validate_input("8", NumeralSystem.OCTAL)
        False
        >>> validate_input("1.", "binary")
        False
    """
    if not isinstance(literal, str) or not literal.strip():
        return False

    resolved = NumeralSystem.coerce(system)
    if resolved is None:
        return False

    clean = literal.strip().lower()
    return LITERAL_PATTERNS[resolved].fullmatch(clean) is not None
