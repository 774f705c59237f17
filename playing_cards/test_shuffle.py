""" Tests for the Fisher-Yates shuffle and its random sources. """

from collections import Counter
from typing import List

import numpy as np
import pytest

from playing_cards.deck import full_deck, sort_descending
from playing_cards.shuffle import random_source, shuffle, shuffled


def always(value: int):
    return lambda _: value


def test_shuffle_keeps_elements():
    deck = full_deck()
    original = sort_descending(deck)
    shuffle(deck, random_source(seed=1))
    assert len(deck) == 52
    assert sort_descending(deck) == original


def test_shuffle_is_in_place():
    deck = full_deck()
    result = shuffle(deck, random_source(seed=2))
    assert result is deck


def test_shuffled_leaves_source_alone():
    deck = full_deck()
    copy = shuffled(deck, random_source(seed=3))
    assert deck == full_deck()
    assert copy != deck
    assert sorted(copy) == sorted(deck)


def test_shuffled_without_source():
    deck = full_deck()
    assert sorted(shuffled(deck)) == sorted(deck)


def test_seeded_shuffle_is_reproducible():
    deck = full_deck()
    assert shuffled(deck, random_source(seed=42)) == \
        shuffled(deck, random_source(seed=42))


def test_random_state_source():
    a = shuffled(range(10), random_source(np.random.RandomState(5)))
    b = shuffled(range(10), random_source(seed=5))
    assert a == b


def test_draw_bounds_are_inclusive():
    bounds: List[int] = []

    def record(k: int) -> int:
        bounds.append(k)
        return k - 1

    items = ['a', 'b', 'c', 'd']
    shuffle(items, record)
    assert bounds == [4, 3, 2]
    # Always drawing the index itself swaps nothing
    assert items == ['a', 'b', 'c', 'd']


def test_scripted_shuffle():
    items = ['a', 'b', 'c', 'd']
    shuffle(items, always(0))
    assert items == ['b', 'c', 'd', 'a']


@pytest.mark.parametrize('items', [[], ['only']])
def test_short_sequences_draw_nothing(items):
    def fail(_: int) -> int:
        raise AssertionError('No draw expected')
    assert shuffle(list(items), fail) == items


@pytest.mark.parametrize('value', [-1, 4])
def test_out_of_range_source(value):
    with pytest.raises(ValueError):
        shuffle(['a', 'b', 'c', 'd'], always(value))


def test_shuffle_is_uniform():
    rng = random_source(seed=0)
    counts = Counter(tuple(shuffled('abc', rng)) for _ in range(6000))
    assert len(counts) == 6
    for n in counts.values():
        assert 800 < n < 1200
