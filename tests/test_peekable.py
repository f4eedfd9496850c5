import copy
import operator

import pytest

from double_ended_peekable import (
    DoubleEndedIterator,
    DoubleEndedPeekable,
    Peekable,
    double_ended_peekable,
)
from double_ended_peekable.utils.sentinels import EXHAUSTED, UNFILLED

BACK_OPERATIONS = (
    "next_back",
    "peek_back",
    "peek_back_mut",
    "next_back_if",
    "next_back_if_eq",
    "next_front_back_if",
    "next_front_back_if_eq",
)


def numbers(n):
    yield from range(n)


def test_factory_selects_capabilities():
    assert type(double_ended_peekable(numbers(3))) is Peekable
    assert type(double_ended_peekable(iter([1, 2]))) is Peekable
    assert type(double_ended_peekable({"a": 1})) is Peekable
    assert type(double_ended_peekable([1, 2])) is DoubleEndedPeekable
    assert type(double_ended_peekable("abc")) is DoubleEndedPeekable
    assert type(double_ended_peekable(range(3))) is DoubleEndedPeekable


@pytest.mark.parametrize("name", BACK_OPERATIONS)
def test_front_only_capabilities(name):
    it = double_ended_peekable(numbers(3))
    assert not hasattr(it, name)
    assert not isinstance(it, DoubleEndedIterator)

    assert hasattr(double_ended_peekable([0, 1, 2]), name)


def test_peekable():
    it = Peekable(numbers(3))

    assert it.peek() == 0
    assert it._front == 0
    assert it.peek() == 0
    assert next(it) == 0
    assert it._front is UNFILLED

    assert it.next_if(lambda x: x > 5) is None
    assert it._front == 1
    assert it.next_if(lambda x: x < 5) == 1
    assert it.next_if_eq(2) == 2

    assert it.peek() is None
    assert it._front is EXHAUSTED
    assert it.next_if(lambda x: True, default=-1) == -1
    assert it._back is UNFILLED

    with pytest.raises(StopIteration):
        next(it)


def test_peek_none_elements():
    it = Peekable([None, 1])

    marker = object()
    assert it.peek(marker) is None
    assert it.next_if_eq(None, default=marker) is None
    assert it.peek(marker) == 1
    assert next(it) == 1
    assert it.peek(marker) is marker


def test_peek_mut():
    it = Peekable(["a", "b"])

    ref = it.peek_mut()
    assert ref == "a"
    assert ref.upper() == "A"
    ref.set("z")
    assert list(it) == ["z", "b"]
    assert it.peek_mut() is None


def test_next_if_eq_matches_next_if():
    data = [1, 1, 2, 3, 3, 3]
    by_eq = Peekable(data)
    by_func = Peekable(data)

    for expected in (1, 2, 1, 1, 2, 3, 3, 4, 3, 3):
        assert by_eq.next_if_eq(expected) == by_func.next_if(
            lambda item: item == expected
        )
        assert by_eq.peek() == by_func.peek()


def test_size_hint():
    it = Peekable(iter([0, 1, 2]))
    assert it.size_hint() == (3, None)
    assert it.peek() == 0
    assert it.size_hint() == (3, None)
    assert next(it) == 0
    assert operator.length_hint(it) == 2

    it = Peekable(numbers(3))
    assert it.size_hint() == (0, None)
    assert it.peek() == 0
    assert it.size_hint() == (1, None)


def test_copy():
    it = Peekable(iter([0, 1, 2]))
    assert it.peek() == 0

    other = copy.copy(it)
    assert list(other) == [0, 1, 2]
    assert list(it) == [0, 1, 2]


def test_repr():
    it = Peekable(iter([0]))
    assert it.peek() == 0
    assert repr(it).startswith("Peekable(iter=<list_iterator")
    assert repr(it).endswith("front=0, back=UNFILLED)")
