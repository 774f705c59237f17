"""
Classes related to the definition of what a `Card` is.
"""

from enum import Enum
from functools import total_ordering
from typing import Optional

from playing_cards.constants import (
    Color,
    FACE_RANKS,
    RANK_NAMES,
    RANK_SYMBOLS,
    SUIT_LETTERS
)
from playing_cards.generator import SequenceGenerator


@total_ordering
class Rank(Enum):
    """
    The face value of a `Card`, Ace through King. The native ordering is
    aces low; use `compare` or `ranking` for aces high.
    """
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @classmethod
    def first(cls) -> "Rank":
        return cls.ACE

    @classmethod
    def generate(cls) -> SequenceGenerator["Rank"]:
        """ Enumerate every `Rank` from Ace to King. """
        return SequenceGenerator.create(cls)

    def successor(self) -> Optional["Rank"]:
        if self is Rank.KING:
            return None
        return Rank(self.value + 1)

    def ranking(self, aces_high: bool = False) -> int:
        """
        The ordinal of this `Rank`, except that the Ace sorts above the King
        when `aces_high` is set.
        """
        if aces_high and self is Rank.ACE:
            return Rank.KING.value + 1
        return self.value

    def compare(self, other: "Rank", aces_high: bool = False) -> int:
        """
        Three-way comparison: -1 if `self` ranks below `other`, 0 if they are
        the same and 1 if `self` ranks above.
        """
        lhs = self.ranking(aces_high=aces_high)
        rhs = other.ranking(aces_high=aces_high)
        if lhs < rhs:
            return -1
        elif lhs == rhs:
            return 0
        return 1

    @property
    def symbol(self) -> str:
        return RANK_SYMBOLS[self.value]

    @property
    def display_name(self) -> str:
        return RANK_NAMES[self.value]

    @property
    def is_face_card(self) -> bool:
        return self.value in FACE_RANKS

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


@total_ordering
class Suit(Enum):
    """
    The suit of a `Card`. Members are declared in Bridge order, which is both
    the enumeration order and the outranking order:
    Spades > Hearts > Diamonds > Clubs.
    """
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3
    CLUBS = 4

    @classmethod
    def first(cls) -> "Suit":
        return cls.SPADES

    @classmethod
    def generate(cls) -> SequenceGenerator["Suit"]:
        """ Enumerate every `Suit` in Bridge order. """
        return SequenceGenerator.create(cls)

    def successor(self) -> Optional["Suit"]:
        if self is Suit.SPADES:
            return Suit.HEARTS
        elif self is Suit.HEARTS:
            return Suit.DIAMONDS
        elif self is Suit.DIAMONDS:
            return Suit.CLUBS
        return None

    def outranks(self, other: "Suit") -> bool:
        """ No `Suit` outranks itself. """
        if self is other:
            return False
        return self.value < other.value

    @property
    def symbol(self) -> str:
        return {
            Suit.SPADES: '♠',
            Suit.HEARTS: '♥',
            Suit.DIAMONDS: '♦',
            Suit.CLUBS: '♣'
        }[self]

    @property
    def display_name(self) -> str:
        return self.name.lower()

    @property
    def color(self) -> Color:
        if self is Suit.SPADES or self is Suit.CLUBS:
            return Color.BLACK
        return Color.RED

    def __lt__(self, other):
        if not isinstance(other, Suit):
            return NotImplemented
        return other.outranks(self)


@total_ordering
class Card:
    """
    A traditional Western playing card, without Jokers.

    Two `Cards` are equal when both their `Rank` and `Suit` are equal. One
    `Card` is less than another when the other outranks it, with aces low.

    Examples
    --------
    >>> Card(Rank.KING, Suit.SPADES) > Card(Rank.KING, Suit.DIAMONDS)
    True
    >>> Card(Rank.ACE, Suit.HEARTS).outranks(Card(Rank.KING, Suit.SPADES),
    ...                                      aces_high=True)
    True
    """
    def __init__(self, rank: Rank, suit: Suit):
        self._rank = rank
        self._suit = suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def symbol(self) -> str:
        return self.rank.symbol + self.suit.symbol

    @property
    def is_face_card(self) -> bool:
        return self.rank.is_face_card

    def outranks(self, other: "Card", aces_high: bool = False) -> bool:
        """
        Return whether this `Card` beats `other`. The higher `Rank` wins, and
        ties are broken by `Suit`.

        Parameters
        ----------
        other : Card
            The `Card` to compare against
        aces_high : bool
            If True, the Ace ranks above the King instead of below the Two.
        """
        rank_comparison = self.rank.compare(other.rank, aces_high=aces_high)
        if rank_comparison != 0:
            return rank_comparison == 1
        return self.suit.outranks(other.suit)

    def equals(self, other: "Card") -> bool:
        return self.rank == other.rank and self.suit == other.suit

    def simple_description(self) -> str:
        return "The {0} of {1}".format(self.rank.display_name,
                                       self.suit.display_name)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return other.outranks(self)

    def __hash__(self):
        # The symbol is unique across the 52 cards
        return hash(self.symbol)

    def __repr__(self):
        return "Card: {0}".format(self.symbol)


def deserialize(symbol: str) -> Card:
    """
    Convert a card symbol back to a `Card`.

    Parameters
    ----------
    symbol : str
        A rank symbol (A, 2, 3, ..., 10, J, Q, K) followed by either a suit
        glyph or a suit letter (S, H, D, C). Letters are case-insensitive.
    """
    # Emoji suit glyphs carry a trailing variation selector
    cleaned = symbol.strip().replace('\ufe0f', '').upper()
    if len(cleaned) < 2:
        raise ValueError("'{0}' is not a card symbol".format(symbol))
    return Card(_map_rank(cleaned[:-1]), _map_suit(cleaned[-1]))


def _map_rank(rank: str) -> Rank:
    for r in Rank.generate():
        if r.symbol == rank:
            return r
    raise ValueError("'{0}' is not a rank symbol".format(rank))


def _map_suit(suit: str) -> Suit:
    if suit in SUIT_LETTERS:
        return Suit(SUIT_LETTERS.index(suit) + 1)
    for s in Suit.generate():
        if s.symbol == suit:
            return s
    raise ValueError("'{0}' is not a suit symbol".format(suit))
