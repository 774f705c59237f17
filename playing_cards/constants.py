"""
Constants that define the deck's display tables and notable rank sets.
"""

from enum import Enum
from typing import (
    Dict,
    Set
)


class Color(Enum):
    BLACK = 1
    RED = 2

    def __repr__(self):
        return self.name.lower()


# Keyed by the ordinal of the rank. Numeric ranks render as their ordinal.
RANK_SYMBOLS: Dict[int, str] = {i: str(i) for i in range(2, 11)}
RANK_SYMBOLS[1] = "A"
RANK_SYMBOLS[11] = "J"
RANK_SYMBOLS[12] = "Q"
RANK_SYMBOLS[13] = "K"

RANK_NAMES: Dict[int, str] = {i: str(i) for i in range(2, 11)}
RANK_NAMES[1] = "ace"
RANK_NAMES[11] = "jack"
RANK_NAMES[12] = "queen"
RANK_NAMES[13] = "king"

# Jack, Queen and King
FACE_RANKS: Set[int] = {11, 12, 13}

# A Piquet deck drops Two through Six, leaving 32 cards
PIQUET_EXCLUDED_RANKS: Set[int] = {i for i in range(2, 7)}

# Suit letters accepted by `deserialize`, in Bridge order
SUIT_LETTERS = 'SHDC'
