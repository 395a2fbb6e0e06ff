"""
Core math modules for numconv

Digit mapping, literal parsing and base rendering.
"""

# Digits
from numconv.core.math.digits import (
    DIGIT_ALPHABET,
    MAX_FRACTIONAL_DIGITS,
    STEP_DISPLAY_PRECISION,
    ConversionFault,
    digit_char,
    digit_value,
    format_decimal,
    format_fixed,
)

# Magnitude Parser
from numconv.core.math.magnitude import (
    parse_literal,
    to_decimal_magnitude,
)

# Base Renderer
from numconv.core.math.rendering import (
    BaseRendering,
    DivisionRecord,
    MultiplicationRecord,
    from_decimal_magnitude,
    render_magnitude,
)

__all__ = [
    # Digits: constants
    "DIGIT_ALPHABET",
    "MAX_FRACTIONAL_DIGITS",
    "STEP_DISPLAY_PRECISION",
    # Digits: exceptions
    "ConversionFault",
    # Digits: functions
    "digit_char",
    "digit_value",
    "format_decimal",
    "format_fixed",
    # Magnitude Parser
    "parse_literal",
    "to_decimal_magnitude",
    # Base Renderer: types
    "BaseRendering",
    "DivisionRecord",
    "MultiplicationRecord",
    # Base Renderer: functions
    "from_decimal_magnitude",
    "render_magnitude",
]
