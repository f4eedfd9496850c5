# Top-level error class


class PeekableError(Exception):
    pass


# Capability errors


class CapabilityError(PeekableError, TypeError):
    """
    The wrapped producer cannot yield elements from its back.
    """


# Contract violations


class ReentrantAccessError(PeekableError, RuntimeError):
    """
    A peekable was used from inside one of its own predicates.
    """


class StaleSlotReferenceError(PeekableError):
    """
    A `SlotReference` was written to after the element it referenced was
    consumed or moved to another slot.
    """
