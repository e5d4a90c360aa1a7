"""Exception classes for nodeseq."""


class NodeSequenceError(Exception):
    """Base exception for all nodeseq errors."""


class InvariantViolationError(NodeSequenceError, AssertionError):
    """Raised when the list's structure is found to be internally inconsistent."""
