"""
Print a deck, or part of one, from the command line.

Examples
--------
$ python -m playing_cards.cli --subset face --order descending
K♠ K♥ K♦ K♣ Q♠ Q♥ Q♦ Q♣ J♠ J♥ J♦ J♣
$ python -m playing_cards.cli --subset piquet --shuffle --seed 3 --names
"""

import argparse
import logging
from typing import List, Optional

from playing_cards.card import Card
from playing_cards.deck import (
    face_cards,
    full_deck,
    piquet_deck,
    sort_ascending,
    sort_descending
)
from playing_cards.shuffle import random_source, shuffle
from playing_cards.util import PrintableDeck

SUBSETS = {
    'full': full_deck,
    'face': face_cards,
    'piquet': piquet_deck
}


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Build, shuffle and sort a standard 52-card deck'
    )
    parser.add_argument('--subset',
                        choices=sorted(SUBSETS),
                        default='full',
                        help='Which cards to include')
    parser.add_argument('--order',
                        choices=['deck', 'ascending', 'descending'],
                        default='deck',
                        help='Sort the cards after any shuffle. "deck" keeps '
                             'the suit-major order (or the shuffled order)')
    parser.add_argument('--aces-high',
                        action='store_true',
                        help='Rank Aces above Kings when sorting')
    parser.add_argument('--shuffle',
                        action='store_true',
                        help='Shuffle the cards')
    parser.add_argument('--seed',
                        type=int,
                        help='Seed for the shuffle, for reproducible output')
    parser.add_argument('--names',
                        action='store_true',
                        help='Print one card name per line instead of symbols')
    parser.add_argument('--verbose',
                        action='store_true',
                        help='Log debug messages')
    return parser


def build_cards(subset: str,
                order: str,
                aces_high: bool = False,
                seed: Optional[int] = None,
                shuffle_cards: bool = False) -> List[Card]:
    """
    Assemble the cards requested on the command line.

    Parameters
    ----------
    subset : str
        One of the keys of `SUBSETS`
    order : str
        'deck', 'ascending' or 'descending'
    aces_high : bool
        If True, Aces sort above Kings.
    seed : Optional[int]
        Seed for the shuffle. Only valid when `shuffle_cards` is set.
    shuffle_cards : bool
        Whether to shuffle the cards before any sort
    """
    if seed is not None and not shuffle_cards:
        raise ValueError('A seed can only be given together with --shuffle')
    cards = SUBSETS[subset]()
    if shuffle_cards:
        shuffle(cards, random_source(seed))
    if order == 'ascending':
        cards = sort_ascending(cards, aces_high=aces_high)
    elif order == 'descending':
        cards = sort_descending(cards, aces_high=aces_high)
    return cards


def main(argv: Optional[List[str]] = None) -> None:
    parser = setup_parser()
    args = parser.parse_args(argv)
    log_format = '[%(asctime)s %(levelname)s] %(message)s'
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=log_format)

    cards = PrintableDeck(build_cards(subset=args.subset,
                                      order=args.order,
                                      aces_high=args.aces_high,
                                      seed=args.seed,
                                      shuffle_cards=args.shuffle))
    logging.getLogger(__name__).info(
        'Selected {0} cards from the {1} deck'.format(len(cards), args.subset)
    )
    if args.names:
        for description in cards.descriptions():
            print(description)
    else:
        print(cards)


if __name__ == '__main__':
    main()
