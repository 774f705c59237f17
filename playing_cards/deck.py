"""
Assembly of the 52-card deck and the sub-decks, filters and sorts built on it.

Examples
--------
>>> deck = full_deck()
>>> len(deck)
52
>>> deck[36]
Card: J♦

The deck is suit-major: the 13 Spades from Ace to King, then Hearts, Diamonds
and Clubs.

>>> [c.symbol for c in sort_descending(face_cards(deck))[:3]]
['K♠', 'K♥', 'K♦']
"""

from functools import cmp_to_key
import logging
from typing import (
    Callable,
    Iterable,
    List,
    Optional
)

from playing_cards.card import Card, Rank, Suit
from playing_cards.constants import PIQUET_EXCLUDED_RANKS


def full_deck() -> List[Card]:
    """
    Return the 52 `Cards`, with `Suit` as the outer enumeration and `Rank` as
    the inner one.
    """
    deck = []
    for suit in Suit.generate():
        for rank in Rank.generate():
            deck.append(Card(rank, suit))
    logging.getLogger(__name__).debug(
        'Built a full deck of {0} cards'.format(len(deck))
    )
    return deck


def filter_deck(deck: Iterable[Card],
                predicate: Callable[[Card], bool]) -> List[Card]:
    """ Return the `Cards` matching `predicate`, in their original order. """
    return [c for c in deck if predicate(c)]


def face_cards(deck: Optional[Iterable[Card]] = None) -> List[Card]:
    """
    Return the Jacks, Queens and Kings of `deck`, or of a full deck if no deck
    is given.
    """
    if deck is None:
        deck = full_deck()
    return filter_deck(deck, lambda c: c.is_face_card)


def piquet_deck(deck: Optional[Iterable[Card]] = None) -> List[Card]:
    """
    Return the 32-card Piquet deck: every `Card` except Two through Six.

    Parameters
    ----------
    deck : Optional[Iterable[Card]]
        The `Cards` to filter. If None, start from a full deck.
    """
    if deck is None:
        deck = full_deck()
    return filter_deck(deck,
                       lambda c: c.rank.value not in PIQUET_EXCLUDED_RANKS)


def sort_descending(deck: Iterable[Card],
                    aces_high: bool = False) -> List[Card]:
    """
    Return a new list with the strongest `Card` first. The sort is stable.

    Parameters
    ----------
    deck : Iterable[Card]
        The `Cards` to sort
    aces_high : bool
        If True, Aces sort above Kings.
    """
    return sorted(deck, key=_outranking_key(aces_high), reverse=True)


def sort_ascending(deck: Iterable[Card],
                   aces_high: bool = False) -> List[Card]:
    """ Return a new list with the weakest `Card` first. The sort is stable. """
    return sorted(deck, key=_outranking_key(aces_high))


def _outranking_key(aces_high: bool) -> Callable[[Card], object]:
    def compare(a: Card, b: Card) -> int:
        if a.outranks(b, aces_high=aces_high):
            return 1
        elif b.outranks(a, aces_high=aces_high):
            return -1
        return 0
    return cmp_to_key(compare)
