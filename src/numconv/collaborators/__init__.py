"""
Collaborator interfaces consumed around the conversion core.

Contains the key-value store and character table contracts.
"""

from numconv.collaborators.characters import (
    CharacterEntry,
    CharacterTable,
    StaticCharacterTable,
)
from numconv.collaborators.storage import KeyValueStore, MemoryKeyValueStore

__all__ = [
    # Storage
    "KeyValueStore",
    "MemoryKeyValueStore",
    # Character table
    "CharacterEntry",
    "CharacterTable",
    "StaticCharacterTable",
]
