"""
numconv: positional numeral system conversion with step traces

Converts literals between binary, octal, decimal and hexadecimal (signed,
with fractional parts) and explains each arithmetic step.

    >>> from numconv import convert_number
    >>> convert_number("FF", "hexadecimal", "binary").result
    '11111111'
"""

from numconv.converter import (
    ConverterConfig,
    NumberConverter,
    StageOutcome,
    convert_number,
)
from numconv.core.contracts import validate_conversion_result, validate_input
from numconv.core.domain import (
    NUMERAL_SYSTEMS,
    ConversionOutcome,
    ConversionResult,
    ConversionStep,
    NumeralSystem,
    numeral_system_options,
)

__all__ = [
    # Operations
    "convert_number",
    "validate_input",
    "validate_conversion_result",
    # Orchestrator
    "ConverterConfig",
    "NumberConverter",
    "StageOutcome",
    # Domain
    "NUMERAL_SYSTEMS",
    "ConversionOutcome",
    "ConversionResult",
    "ConversionStep",
    "NumeralSystem",
    "numeral_system_options",
]
