"""
Fisher-Yates shuffling with an injected source of randomness.

The functions here work on sequences of any element type; nothing depends on
`Card` internals.

Examples
--------
>>> deck = full_deck()
>>> hand = shuffled(deck, random_source(seed=7))[:5]

`deck` itself is left in its original order.
"""

import logging
from typing import (
    Callable,
    List,
    MutableSequence,
    Optional,
    Sequence,
    TypeVar,
    Union
)

import numpy as np
from sklearn.utils import check_random_state

T = TypeVar('T')

# Takes a bound `k` and returns a uniformly random integer in [0, k)
RandomSource = Callable[[int], int]


def random_source(
        seed: Union[None, int, np.random.RandomState] = None
) -> RandomSource:
    """
    Build a `RandomSource` backed by numpy.

    Parameters
    ----------
    seed : Union[None, int, np.random.RandomState]
        An integer seed for reproducible draws, an existing `RandomState` to
        draw from, or None for a freshly seeded, unshared `RandomState`.
    """
    if seed is None:
        seed = np.random.RandomState()
    rng = check_random_state(seed)

    def random_below(k: int) -> int:
        return int(rng.randint(k))
    return random_below


def shuffle(items: MutableSequence[T],
            random_below: RandomSource) -> MutableSequence[T]:
    """
    Shuffle `items` in place and return it.

    For each index from the last down to 1, swap the element at that index
    with one drawn uniformly from the positions up to and including it.

    Parameters
    ----------
    items : MutableSequence[T]
        The sequence to permute
    random_below : RandomSource
        A function that takes `k` and returns an integer in [0, k)
    """
    for index in range(len(items) - 1, 0, -1):
        j = random_below(index + 1)
        if not 0 <= j <= index:
            raise ValueError(
                'The random source returned {0}, outside [0, {1}]'.format(
                    j, index
                )
            )
        items[index], items[j] = items[j], items[index]
    logging.getLogger(__name__).debug(
        'Shuffled {0} items'.format(len(items))
    )
    return items


def shuffled(items: Sequence[T],
             random_below: Optional[RandomSource] = None) -> List[T]:
    """
    Return a shuffled copy of `items`, leaving `items` untouched.

    Parameters
    ----------
    items : Sequence[T]
        The elements to copy
    random_below : Optional[RandomSource]
        The source of randomness. If None, use an unseeded `random_source`.
    """
    if random_below is None:
        random_below = random_source()
    copy = list(items)
    shuffle(copy, random_below)
    return copy
