"""
Domain models and value objects.

Contains the numeral system selector and the conversion value types.
"""

from numconv.core.domain.conversion import (
    ConversionOutcome,
    ConversionResult,
    ConversionStep,
    ParsedMagnitude,
)
from numconv.core.domain.numeral_system import (
    NUMERAL_SYSTEMS,
    NumeralSystem,
    numeral_system_options,
)

__all__ = [
    # Numeral systems
    "NUMERAL_SYSTEMS",
    "NumeralSystem",
    "numeral_system_options",
    # Conversion values
    "ConversionOutcome",
    "ConversionResult",
    "ConversionStep",
    "ParsedMagnitude",
]
