from playing_cards.card import Card, deserialize, Rank, Suit
from playing_cards.constants import *
from playing_cards.deck import (
    face_cards,
    filter_deck,
    full_deck,
    piquet_deck,
    sort_ascending,
    sort_descending
)
from playing_cards.generator import SequenceGenerator
from playing_cards.shuffle import random_source, RandomSource, shuffle, shuffled
from playing_cards.util import concat_symbols, PrintableDeck
