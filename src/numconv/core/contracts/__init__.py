"""
Contract Validation Module

Lexical validation of input literals and JSON Schema validation of the
ConversionResult payload.
"""

from .literal import LITERAL_PATTERNS, validate_input
from .validators import (
    ContractValidator,
    ConversionResultValidator,
    SchemaLoader,
    validate_conversion_result,
)

__all__ = [
    # Literals
    "LITERAL_PATTERNS",
    "validate_input",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionResultValidator",
    # Functions
    "validate_conversion_result",
]
