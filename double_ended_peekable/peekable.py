from __future__ import annotations

import copy
import operator
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

import wrapt
from interface_meta import override

from .errors import CapabilityError, ReentrantAccessError, StaleSlotReferenceError
from .iterators import DoubleEndedIterator, SizeHint, as_double_ended, get_size_hint
from .utils.sentinels import (
    EXHAUSTED,
    UNFILLED,
    ExhaustedType,
    UnfilledType,
    holds_element,
)

T = TypeVar("T")
D = TypeVar("D")

Slot = Union[T, UnfilledType, ExhaustedType]


class Peekable(Iterator[T]):
    """
    An iterator that allows you to look at (and conditionally consume) the
    next element without advancing past it.

    Elements pulled from the wrapped iterator but not yet handed out are
    buffered in a "front" slot. A second "back" slot is only ever populated by
    the `DoubleEndedPeekable` subclass, which adds the symmetric operations on
    the back of double-ended iterators; on this class it always stays
    `UNFILLED`. Each slot is either `UNFILLED` (nothing has been pulled for
    that end), `EXHAUSTED` (the wrapped iterator ran dry for that end), or
    holds the buffered element.

    Operations that find no element return `default` (`None` unless
    specified), except for `next(...)`, which raises `StopIteration` as per the
    iterator protocol.

    Predicates passed to the conditional methods must not themselves use the
    peekable; doing so raises `ReentrantAccessError`.
    """

    def __init__(self, iterable: Iterable[T]):
        self._iter: Iterator[T] = iter(iterable)
        self._front: Slot[T] = UNFILLED
        self._back: Slot[T] = UNFILLED
        # Incremented whenever a slot's element is taken, invalidating any
        # outstanding `SlotReference`s.
        self._version = 0
        self._busy = False

    # Iterator protocol

    def __next__(self) -> T:
        self._check_access()
        item = self._take_front()
        if item is EXHAUSTED:
            raise StopIteration
        return item

    def size_hint(self) -> SizeHint:
        """
        Bounds on the number of remaining elements, as a tuple of
        `(lower, upper)`, where an `upper` of `None` means "unknown". This is
        the hint of the wrapped iterator, plus any buffered elements.
        """
        lower, upper = get_size_hint(self._iter)
        buffered = sum(
            1 for slot in (self._front, self._back) if holds_element(slot)
        )
        return lower + buffered, None if upper is None else upper + buffered

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    # Peeking

    def peek(self, default: D = None) -> Union[T, D]:  # type: ignore[assignment]
        """
        Retrieve the element that will be next returned by the iterator,
        without consuming it.

        Repeated calls without an intervening consuming operation return the
        same element, and pull at most one element from the wrapped iterator.

        Args:
            default: The value to return if there are no more elements.
        """
        self._check_access()
        slot = self._locate_front()
        return default if slot is None else getattr(self, slot)

    def peek_mut(
        self, default: D = None  # type: ignore[assignment]
    ) -> Union[SlotReference[T], D]:
        """
        Like `.peek()`, but return a `SlotReference` proxying the next element.
        Mutations applied through the reference (including replacing the
        element entirely using `SlotReference.set()`) are visible to the next
        consuming operation.

        Args:
            default: The value to return if there are no more elements.
        """
        self._check_access()
        slot = self._locate_front()
        return default if slot is None else SlotReference(self, slot)

    # Conditional consumption

    def next_if(
        self,
        func: Callable[[T], Any],
        default: D = None,  # type: ignore[assignment]
    ) -> Union[T, D]:
        """
        Consume and return the next element if `func(element)` is truthy.
        Otherwise, the element is left in place (it will be returned by the
        next call to `.peek()` or `next(...)`) and `default` is returned.

        `func` is called at most once, and not at all if the iterator is
        exhausted. If it raises, the element is left in place and the exception
        propagates.

        Args:
            func: The predicate to evaluate against the next element.
            default: The value to return if no element was consumed.
        """
        self._check_access()
        item = self._take_front()
        accepted = False
        try:
            accepted = item is not EXHAUSTED and bool(self._call(func, item))
        finally:
            if not accepted:
                self._front = item
        return item if accepted else default

    def next_if_eq(
        self, expected: Any, default: D = None  # type: ignore[assignment]
    ) -> Union[T, D]:
        """
        Consume and return the next element if it is equal to `expected`.
        Equivalent to `.next_if(lambda item: item == expected)`.
        """
        return self.next_if(lambda item: item == expected, default=default)

    # Copying, equality and representation

    def __copy__(self) -> Peekable[T]:
        other = self.__class__.__new__(self.__class__)
        other.__dict__.update(self.__dict__)
        other._iter = copy.copy(self._iter)
        return other

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._iter, self._front, self._back) == (
            other._iter,
            other._front,
            other._back,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(iter={self._iter!r}, "
            f"front={self._front!r}, back={self._back!r})"
        )

    # Slot management

    def _check_access(self) -> None:
        if self._busy:
            raise ReentrantAccessError(
                f"`{self.__class__.__name__}` instances cannot be used from "
                "within their own predicates."
            )

    def _call(self, func: Callable[..., Any], *items: T) -> Any:
        self._busy = True
        try:
            return func(*items)
        finally:
            self._busy = False

    def _locate_front(self) -> Optional[str]:
        """
        Fill the front slot if necessary, and return the name of the attribute
        holding the element next in line from the front (or `None` if there is
        no such element). When the front is exhausted, the element may still be
        buffered in the back slot (if it was the last element, peeked from the
        back).
        """
        if self._front is UNFILLED:
            self._front = next(self._iter, EXHAUSTED)
        if holds_element(self._front):
            return "_front"
        if holds_element(self._back):
            return "_back"
        return None

    def _take_front(self) -> Slot[T]:
        """
        Remove and return the element next in line from the front, or
        `EXHAUSTED`. The front slot is always left `UNFILLED`.
        """
        item, self._front = self._front, UNFILLED
        if item is UNFILLED:
            item = next(self._iter, EXHAUSTED)
        if item is EXHAUSTED:
            # The last element may have been buffered from the back.
            item, self._back = self._back, UNFILLED
            if item is UNFILLED:
                item = EXHAUSTED
        self._version += 1
        return item


class DoubleEndedPeekable(Peekable[T], DoubleEndedIterator[T]):
    """
    A double-ended iterator that allows you to look at (and conditionally
    consume) the next element from either end without advancing past it.

    In addition to the operations provided by `Peekable`, this class buffers
    elements peeked from the back of the wrapped iterator, and provides
    two-sided conditional consumption via `.next_front_back_if()`.

    When only one element remains, peeking from both ends observes that same
    element, and consuming it from either end removes it from both.

    Args:
        iterable: A `DoubleEndedIterator` (or any iterator with a `next_back`
            method) or a `Sequence` (which is wrapped in a `SequenceIterator`).

    Raises:
        CapabilityError: If `iterable` cannot produce elements from its back.
    """

    def __init__(self, iterable: Iterable[T]):
        super().__init__(as_double_ended(iterable))

    @override
    def next_back(self) -> T:
        self._check_access()
        item = self._take_back()
        if item is EXHAUSTED:
            raise StopIteration
        return item

    # Peeking

    def peek_back(self, default: D = None) -> Union[T, D]:  # type: ignore[assignment]
        """
        Retrieve the element that will be next returned by `.next_back()`,
        without consuming it.

        Args:
            default: The value to return if there are no more elements.
        """
        self._check_access()
        slot = self._locate_back()
        return default if slot is None else getattr(self, slot)

    def peek_back_mut(
        self, default: D = None  # type: ignore[assignment]
    ) -> Union[SlotReference[T], D]:
        """
        Like `.peek_back()`, but return a `SlotReference` proxying the element.
        """
        self._check_access()
        slot = self._locate_back()
        return default if slot is None else SlotReference(self, slot)

    # Conditional consumption

    def next_back_if(
        self,
        func: Callable[[T], Any],
        default: D = None,  # type: ignore[assignment]
    ) -> Union[T, D]:
        """
        Consume and return the back element if `func(element)` is truthy;
        otherwise leave it in place and return `default`.
        """
        self._check_access()
        item = self._take_back()
        accepted = False
        try:
            accepted = item is not EXHAUSTED and bool(self._call(func, item))
        finally:
            if not accepted:
                self._back = item
        return item if accepted else default

    def next_back_if_eq(
        self, expected: Any, default: D = None  # type: ignore[assignment]
    ) -> Union[T, D]:
        return self.next_back_if(lambda item: item == expected, default=default)

    def next_front_back_if(
        self,
        func: Callable[[T, T], Any],
        default: D = None,  # type: ignore[assignment]
    ) -> Union[Tuple[T, T], D]:
        """
        Consume and return the front and back elements as a tuple of
        `(front, back)` if `func(front, back)` is truthy. Otherwise, both
        elements are left in place and `default` is returned.

        Two distinct elements are required: if either end is exhausted
        (including when only a single element remains) `func` is not called,
        nothing is consumed, and `default` is returned.

        Args:
            func: The predicate to evaluate against the front and back
                elements.
            default: The value to return if no elements were consumed.
        """
        self._check_access()
        front = self._take_front()
        back = self._take_back()
        accepted = False
        try:
            accepted = (
                front is not EXHAUSTED
                and back is not EXHAUSTED
                and bool(self._call(func, front, back))
            )
        finally:
            if not accepted:
                self._front, self._back = front, back
        return (front, back) if accepted else default

    def next_front_back_if_eq(
        self,
        expected_front: Any,
        expected_back: Any,
        default: D = None,  # type: ignore[assignment]
    ) -> Union[Tuple[T, T], D]:
        """
        Consume and return the front and back elements if they are equal to
        `expected_front` and `expected_back` respectively.
        """
        return self.next_front_back_if(
            lambda front, back: front == expected_front and back == expected_back,
            default=default,
        )

    # Slot management

    def _pull_back(self) -> Slot[T]:
        try:
            return self._iter.next_back()  # type: ignore[attr-defined]
        except StopIteration:
            return EXHAUSTED

    def _locate_back(self) -> Optional[str]:
        if self._back is UNFILLED:
            self._back = self._pull_back()
        if holds_element(self._back):
            return "_back"
        if holds_element(self._front):
            return "_front"
        return None

    def _take_back(self) -> Slot[T]:
        item, self._back = self._back, UNFILLED
        if item is UNFILLED:
            item = self._pull_back()
        if item is EXHAUSTED:
            item, self._front = self._front, UNFILLED
            if item is UNFILLED:
                item = EXHAUSTED
        self._version += 1
        return item


class SlotReference(Generic[T], wrapt.ObjectProxy):
    """
    A transparent proxy for an element buffered by a peekable, as returned by
    `.peek_mut()` and `.peek_back_mut()`.

    The reference behaves just like the element, and in-place mutations of
    mutable elements are visible to the peekable. Use `.set()` to replace the
    element altogether; augmented assignments (`ref += 1`, etc.) do the same.
    References become stale once the element is consumed or moved between
    slots, after which `.set()` and augmented assignments raise
    `StaleSlotReferenceError`.
    """

    def __init__(self, owner: Peekable[T], slot: str):
        wrapt.ObjectProxy.__init__(self, getattr(owner, slot))
        self._self_owner = owner
        self._self_slot = slot
        self._self_version = owner._version

    def set(self, value: T) -> None:
        """
        Replace the buffered element with `value`.
        """
        self._self_check_current()
        setattr(self._self_owner, self._self_slot, value)
        self.__wrapped__ = value

    def _self_check_current(self) -> None:
        if self._self_owner._version != self._self_version:
            raise StaleSlotReferenceError(
                "The referenced element has already been consumed or moved."
            )

    def _self_inplace(self, op: Callable[[Any, Any], Any], other: Any) -> Any:
        self._self_check_current()
        self.set(op(self.__wrapped__, other))
        return self

    def __repr__(self) -> str:
        return self.__wrapped__.__repr__()

    # Augmented assignment writes the result back to the slot

    def __iadd__(self, other: Any) -> Any:
        return self._self_inplace(operator.iadd, other)

    def __isub__(self, other: Any) -> Any:
        return self._self_inplace(operator.isub, other)

    def __imul__(self, other: Any) -> Any:
        return self._self_inplace(operator.imul, other)

    def __imatmul__(self, other: Any) -> Any:
        return self._self_inplace(operator.imatmul, other)

    def __itruediv__(self, other: Any) -> Any:
        return self._self_inplace(operator.itruediv, other)

    def __ifloordiv__(self, other: Any) -> Any:
        return self._self_inplace(operator.ifloordiv, other)

    def __imod__(self, other: Any) -> Any:
        return self._self_inplace(operator.imod, other)

    def __ipow__(self, other: Any) -> Any:
        return self._self_inplace(operator.ipow, other)

    def __ilshift__(self, other: Any) -> Any:
        return self._self_inplace(operator.ilshift, other)

    def __irshift__(self, other: Any) -> Any:
        return self._self_inplace(operator.irshift, other)

    def __iand__(self, other: Any) -> Any:
        return self._self_inplace(operator.iand, other)

    def __ixor__(self, other: Any) -> Any:
        return self._self_inplace(operator.ixor, other)

    def __ior__(self, other: Any) -> Any:
        return self._self_inplace(operator.ior, other)


def double_ended_peekable(iterable: Iterable[T]) -> Peekable[T]:
    """
    Wrap `iterable` in the most capable peekable it supports.

    Args:
        iterable: The iterable to wrap. Double-ended iterators and sequences
            yield a `DoubleEndedPeekable`; any other iterable yields a
            front-only `Peekable`.
    """
    try:
        return DoubleEndedPeekable(iterable)
    except CapabilityError:
        return Peekable(iterable)
