"""
String enum definitions for tile and suggestion concepts.
"""

from enum import Enum


class Suit(str, Enum):
    """Tile suits, in display and index order."""

    MAN = "man"  # characters
    PIN = "pin"  # circles
    SOU = "sou"  # bamboo
    ZIHAI = "zihai"  # honors: winds then dragons


class SuggestionKind(str, Enum):
    """What a suggestion asks the player to do."""

    DECLARE = "declare"  # expose the must-declare tile
    WIN = "win"  # hand is already complete
    DISCARD = "discard"
