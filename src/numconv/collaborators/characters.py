"""
Character table interface

Rows of a static character-encoding table as shown next to the converter.
Independent of the conversion core: the table carries its own precomputed
representations and shares no logic with convert_number.
"""

from typing import Iterable, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, Field


class CharacterEntry(BaseModel):
    """One row of the character table."""

    decimal_value: int = Field(..., ge=0, description="Code point")
    binary: str = Field(..., pattern="^[01]+$", description="Binary representation")
    octal: str = Field(..., pattern="^[0-7]+$", description="Octal representation")
    hex: str = Field(..., pattern="^[0-9A-Fa-f]+$", description="Hexadecimal representation")
    character: str = Field(..., description="Printable form or control mnemonic")
    description: str = Field("", description="Human-readable name")

    model_config = {"frozen": True}

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against every column."""
        needle = query.strip().lower()
        if not needle:
            return True
        return (
            needle in self.character.lower()
            or needle in self.description.lower()
            or needle in str(self.decimal_value)
            or needle in self.hex.lower()
            or needle in self.binary
            or needle in self.octal
        )


@runtime_checkable
class CharacterTable(Protocol):
    """Read-only source of character table rows."""

    def entries(self) -> Sequence[CharacterEntry]: ...

    def search(self, query: str) -> list[CharacterEntry]: ...


class StaticCharacterTable:
    """CharacterTable over a fixed list of rows."""

    def __init__(self, entries: Iterable[CharacterEntry]):
        self._entries = tuple(entries)

    def entries(self) -> Sequence[CharacterEntry]:
        return self._entries

    def search(self, query: str) -> list[CharacterEntry]:
        """Rows matching `query`; a blank query returns every row."""
        return [entry for entry in self._entries if entry.matches(query)]
