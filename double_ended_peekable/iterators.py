from __future__ import annotations

import operator
from abc import abstractmethod
from collections.abc import Sequence
from typing import Any, Iterator, List, Optional, Tuple, TypeVar

from interface_meta import InterfaceMeta, override

from .errors import CapabilityError

T = TypeVar("T")

SizeHint = Tuple[int, Optional[int]]


class DoubleEndedIterator(Iterator[T], metaclass=InterfaceMeta):
    """
    The base class for iterators that can also yield elements from their back.

    Both ends draw from the same underlying sequence of elements, and iteration
    is complete once the two ends meet: an element produced by `next(...)` is
    never subsequently produced by `.next_back()`, and vice versa.

    Any iterator exposing a callable `next_back` attribute is treated as an
    instance of this class (via `isinstance`), whether or not it inherits from
    it. Subclasses must implement `__next__` and `next_back`, and should
    override `size_hint` when they can bound their remaining length.
    """

    INTERFACE_RAISE_ON_VIOLATION = True

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is DoubleEndedIterator:
            required = ("__iter__", "__next__", "next_back")
            if all(
                any(base.__dict__.get(name) is not None for base in subclass.__mro__)
                for name in required
            ):
                return True
        return NotImplemented

    @abstractmethod
    def next_back(self) -> T:
        """
        Remove and return the element at the back of this iterator.

        Raises:
            StopIteration: When no elements remain.
        """

    def size_hint(self) -> SizeHint:
        """
        Bounds on the number of remaining elements, as a tuple of
        `(lower, upper)`. An `upper` bound of `None` means that the bound is
        unknown (or unbounded).
        """
        return 0, None

    def rev(self) -> DoubleEndedIterator[T]:
        """
        An iterator over the remaining elements of this iterator in reverse
        order. The returned iterator shares state with this one.
        """
        return Rev(self)


class SequenceIterator(DoubleEndedIterator[T]):
    """
    A double-ended iterator over the elements of a `Sequence`.

    Two cursors track the next position to be yielded from the front and one
    past the next position to be yielded from the back. The sequence itself is
    never copied or modified, and is assumed not to change during iteration.
    """

    def __init__(self, seq: Sequence[T]):
        self.seq = seq
        self.front_pos = 0
        self.back_pos = len(seq)

    def __next__(self) -> T:
        front_pos = self.front_pos
        if front_pos < self.back_pos:
            self.front_pos = front_pos + 1
            return self.seq[front_pos]
        raise StopIteration

    @override
    def next_back(self) -> T:
        back_pos = self.back_pos
        if self.front_pos < back_pos:
            self.back_pos = back_pos - 1
            return self.seq[back_pos - 1]
        raise StopIteration

    @override
    def size_hint(self) -> SizeHint:
        remaining = len(self)
        return remaining, remaining

    def remaining(self) -> List[T]:
        """
        The elements not yet yielded from either end, in front-to-back order.
        """
        return [self.seq[pos] for pos in range(self.front_pos, self.back_pos)]

    def __len__(self) -> int:
        return max(self.back_pos - self.front_pos, 0)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SequenceIterator):
            return NotImplemented
        return self.remaining() == other.remaining()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.remaining()!r})"


class Rev(DoubleEndedIterator[T]):
    """
    A view of a double-ended iterator with its front and back swapped.
    """

    def __init__(self, iterator: Any):
        self.iter: DoubleEndedIterator[T] = as_double_ended(iterator)

    def __next__(self) -> T:
        return self.iter.next_back()

    @override
    def next_back(self) -> T:
        return next(self.iter)

    @override
    def size_hint(self) -> SizeHint:
        return get_size_hint(self.iter)

    @override
    def rev(self) -> DoubleEndedIterator[T]:
        return self.iter

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Rev):
            return NotImplemented
        return self.iter == other.iter

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.iter!r})"


def supports_back(obj: Any) -> bool:
    """
    Whether `obj` can produce elements from its back (i.e. whether it is a
    `DoubleEndedIterator`, nominally or structurally).
    """
    return isinstance(obj, DoubleEndedIterator)


def as_double_ended(iterable: Any) -> DoubleEndedIterator:
    """
    Coerce `iterable` into a `DoubleEndedIterator`.

    Double-ended iterators are passed through unchanged, and sequences are
    wrapped in a `SequenceIterator`. Anything else can only be traversed from
    the front, and so cannot be coerced.

    Args:
        iterable: The object to coerce.

    Raises:
        CapabilityError: If `iterable` cannot produce elements from its back.
    """
    if isinstance(iterable, DoubleEndedIterator):
        return iterable
    if isinstance(iterable, Sequence):
        return SequenceIterator(iterable)
    raise CapabilityError(
        f"Objects of type `{type(iterable).__name__}` cannot produce elements "
        "from their back; expected a `DoubleEndedIterator` or a `Sequence`."
    )


def get_size_hint(iterator: Iterator) -> SizeHint:
    """
    Bounds on the number of elements remaining in `iterator`. Iterators that
    do not implement `size_hint()` are bounded below by
    `operator.length_hint()`, and have an unknown upper bound.
    """
    if callable(getattr(iterator, "size_hint", None)):
        return iterator.size_hint()  # type: ignore[attr-defined]
    return operator.length_hint(iterator), None
