from .errors import (
    CapabilityError,
    PeekableError,
    ReentrantAccessError,
    StaleSlotReferenceError,
)
from .iterators import (
    DoubleEndedIterator,
    Rev,
    SequenceIterator,
    as_double_ended,
    supports_back,
)
from .peekable import DoubleEndedPeekable, Peekable, SlotReference, double_ended_peekable

try:
    from ._version import (
        __author__,
        __author_email__,
        __version__,
        __version_tuple__,
    )
except ImportError:  # pragma: no cover
    __version__ = version = "unknown"
    __version_tuple__ = version_tuple = ("unknown",)  # type: ignore
    __author__ = "double-ended-peekable contributors"
    __author_email__ = None

__all__ = [
    "__author__",
    "__author_email__",
    "__version__",
    "__version_tuple__",
    "DoubleEndedIterator",
    "DoubleEndedPeekable",
    "Peekable",
    "Rev",
    "SequenceIterator",
    "SlotReference",
    "as_double_ended",
    "double_ended_peekable",
    "supports_back",
    "PeekableError",
    "CapabilityError",
    "ReentrantAccessError",
    "StaleSlotReferenceError",
]
