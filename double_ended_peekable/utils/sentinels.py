from __future__ import annotations

from enum import Enum
from typing import Any

from typing_extensions import Literal, TypeAlias


class Sentinel(Enum):
    """
    The states of a peek slot that is not holding an element.

    A slot starts out `UNFILLED`, and becomes `EXHAUSTED` once the wrapped
    iterator has nothing left to give from that end. Anything else stored in a
    slot is a buffered element; `None` included.
    """

    UNFILLED = "UNFILLED"
    EXHAUSTED = "EXHAUSTED"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.name


UnfilledType: TypeAlias = Literal[Sentinel.UNFILLED]
UNFILLED: UnfilledType = Sentinel.UNFILLED

ExhaustedType: TypeAlias = Literal[Sentinel.EXHAUSTED]
EXHAUSTED: ExhaustedType = Sentinel.EXHAUSTED


def holds_element(slot: Any) -> bool:
    """
    Whether `slot` holds a buffered element (rather than a slot state).
    """
    return not isinstance(slot, Sentinel)
