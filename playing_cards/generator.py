"""
A constant-memory generator over a closed, ordered set of symbolic values.
"""

from typing import (
    Callable,
    Generic,
    Iterator,
    Optional,
    TypeVar
)

T = TypeVar('T')


class SequenceGenerator(Generic[T]):
    """
    Enumerate a closed set without allocating a backing collection.

    The only state is the current value, which becomes `None` once the
    successor of the last value has been requested. An instance is single-pass;
    use `create` again to start over.

    Examples
    --------
    >>> g = SequenceGenerator.create(Suit)
    >>> g.advance()
    <Suit.SPADES: 1>
    >>> [s.symbol for s in g]
    ['♥', '♦', '♣']
    >>> g.advance() is None
    True
    """
    def __init__(self,
                 first: Optional[T],
                 successor: Callable[[T], Optional[T]]):
        """
        Parameters
        ----------
        first : Optional[T]
            The value the enumeration starts from. `None` gives an already
            exhausted generator.
        successor : Callable[[T], Optional[T]]
            A total function returning the next value, or `None` after the
            last one.
        """
        self._current = first
        self._successor = successor

    @classmethod
    def create(cls, kind) -> "SequenceGenerator":
        """
        Start a generator for `kind`, which must provide a `first()` class
        method and a `successor()` method on its values, like `Rank` and `Suit`.
        """
        return cls(kind.first(), kind.successor)

    @property
    def exhausted(self) -> bool:
        return self._current is None

    def advance(self) -> Optional[T]:
        """
        Return the current value and move to its successor. Once exhausted,
        keep returning `None`.
        """
        current = self._current
        if current is not None:
            self._current = self._successor(current)
        return current

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        value = self.advance()
        if value is None:
            raise StopIteration
        return value

    def __repr__(self):
        if self.exhausted:
            return "SequenceGenerator(exhausted)"
        return "SequenceGenerator(at {0})".format(self._current)
