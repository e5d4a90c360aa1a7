"""nodeseq - Doubly-linked sequence with owning forward links and weak backward links."""

from nodeseq.errors import InvariantViolationError, NodeSequenceError
from nodeseq.invariants import check_invariants
from nodeseq.linkedlist import DoublyLinkedList, Node

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "check_invariants",
    "NodeSequenceError",
    "InvariantViolationError",
]
