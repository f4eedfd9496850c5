import copy

from double_ended_peekable.utils.sentinels import (
    EXHAUSTED,
    UNFILLED,
    Sentinel,
    holds_element,
)


def test_sentinels():
    assert UNFILLED is Sentinel.UNFILLED
    assert EXHAUSTED is Sentinel.EXHAUSTED
    assert UNFILLED is not EXHAUSTED
    assert bool(UNFILLED) is False
    assert bool(EXHAUSTED) is False
    assert repr(UNFILLED) == "UNFILLED"
    assert repr(EXHAUSTED) == "EXHAUSTED"
    assert copy.copy(EXHAUSTED) is EXHAUSTED
    assert copy.deepcopy(UNFILLED) is UNFILLED


def test_holds_element():
    assert not holds_element(UNFILLED)
    assert not holds_element(EXHAUSTED)
    assert holds_element(None)
    assert holds_element(0)
    assert holds_element("")
