"""
Helpers for presenting values that have a `symbol`, which aren't tied to any
single class.
"""

from typing import Iterable, List

from playing_cards.card import Card


def concat_symbols(values: Iterable) -> str:
    """
    Join the `symbol` of each value, e.g. 'A2345678910JQK' for every `Rank`.
    """
    return ''.join(v.symbol for v in values)


class PrintableDeck(list):
    """ A list of `Cards` that prints itself nicely. """

    def __init__(self, cards: Iterable[Card] = ()):
        super().__init__(cards)

    def descriptions(self) -> List[str]:
        return [c.simple_description() for c in self]

    def __str__(self):
        return ' '.join(c.symbol for c in self)

    def __repr__(self):
        return '[{0}]'.format(', '.join(c.symbol for c in self))
