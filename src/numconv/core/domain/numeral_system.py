"""
NumeralSystem: the four supported positional numeral systems

Immutable enumeration used only as a selector. Each member carries its base
and a display label for collaborator selection controls.
"""

from enum import Enum
from typing import Final


class NumeralSystem(str, Enum):
    """Positional numeral system (binary / octal / decimal / hexadecimal)"""

    BINARY = "binary"
    DECIMAL = "decimal"
    OCTAL = "octal"
    HEXADECIMAL = "hexadecimal"

    @property
    def base(self) -> int:
        """Radix of the system (2, 8, 10 or 16)."""
        return _BASES[self]

    @property
    def label(self) -> str:
        """Display label, e.g. 'Binary (Base 2)'."""
        return f"{self.value.capitalize()} (Base {self.base})"

    @classmethod
    def coerce(cls, value: object) -> "NumeralSystem | None":
        """
        Resolve a member from a member or its string value.

        Args:
            value: NumeralSystem member or its lowercase string value

        Returns:
            The matching member, or None when the value is not recognized

        Examples:
            >>> NumeralSystem.coerce("octal")
            <NumeralSystem.OCTAL: 'octal'>
            >>> NumeralSystem.coerce("ternary") is None
            True
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_BASES: Final[dict[NumeralSystem, int]] = {
    NumeralSystem.BINARY: 2,
    NumeralSystem.DECIMAL: 10,
    NumeralSystem.OCTAL: 8,
    NumeralSystem.HEXADECIMAL: 16,
}

# Order shown by selection controls
NUMERAL_SYSTEMS: Final[tuple[NumeralSystem, ...]] = (
    NumeralSystem.BINARY,
    NumeralSystem.DECIMAL,
    NumeralSystem.OCTAL,
    NumeralSystem.HEXADECIMAL,
)


def numeral_system_options() -> list[tuple[str, str, int]]:
    """
    Rows for a system picker: (value, label, base) in display order.

    Returns:
        [("binary", "Binary (Base 2)", 2), ("decimal", ...), ...]
    """
    return [(system.value, system.label, system.base) for system in NUMERAL_SYSTEMS]
