"""Doubly-linked list with owning forward links and weak backward links."""

from __future__ import annotations

import copy
import logging
import weakref
from typing import Any, Generic, Iterable, TypeVar

from nodeseq.errors import InvariantViolationError
from nodeseq.invariants import check_invariants

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """
    A node in the doubly-linked list.

    ``next`` is a strong reference and keeps the following node alive.
    ``prev_ref`` is a weak reference to the preceding node and never does.
    """

    __slots__ = ("value", "next", "prev_ref", "__weakref__")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None
        self.prev_ref: weakref.ref[Node[T]] | None = None

    @property
    def prev(self) -> Node[T] | None:
        """The preceding node, or None if there is none or it no longer exists."""
        if self.prev_ref is None:
            return None
        return self.prev_ref()

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[T]):
    """
    Double-ended sequence with O(1) push and pop at both ends.

    Nodes are owned through the ``next`` chain starting at the head, and the
    tail anchor owns the last node as well. Backward links are weak, so the
    node graph has no reference cycles and dropping the list frees every
    node through reference counting alone.

    The list does no locking. Callers sharing it between threads or tasks
    must guard the whole list with a single lock.
    """

    def __init__(self, values: Iterable[T] = (), *, validate: bool = False) -> None:
        """
        Initialize the list.

        Args:
            values: Initial values, pushed to the back in order
            validate: If True, audit the whole structure after every
                mutating operation. O(n) per operation, meant for debugging.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        self._validate = validate
        if validate:
            logger.debug("Created %s with invariant validation enabled", type(self).__name__)
        for value in values:
            self.push_back(value)

    def push_front(self, value: T) -> None:
        """Insert value before the current head. O(1)."""
        # Node and its weak handle exist before any existing link changes
        node = Node(value)
        node_ref = weakref.ref(node)
        head = self._head
        if head is None:
            self._head = node
            self._tail = node
        else:
            node.next = head
            head.prev_ref = node_ref
            self._head = node
        self._size += 1
        self._after_mutation()

    def push_back(self, value: T) -> None:
        """Insert value after the current tail. O(1)."""
        node = Node(value)
        tail = self._tail
        if tail is None:
            self._head = node
            self._tail = node
        else:
            node.prev_ref = weakref.ref(tail)
            tail.next = node
            self._tail = node
        self._size += 1
        self._after_mutation()

    def pop_back(self) -> T | None:
        """
        Remove and return the value at the tail. O(1).

        Returns:
            The tail's value, or None if the list is empty

        Raises:
            InvariantViolationError: If the tail's backward link no longer
                resolves. Unreachable while the invariants hold.
        """
        tail = self._tail
        if tail is None:
            return None

        link = tail.prev_ref
        if link is None:
            # Single element: the tail is also the head
            self._head = None
            self._tail = None
        else:
            prev = link()
            if prev is None:
                logger.error("Backward link from tail of %r does not resolve", self)
                raise InvariantViolationError("Backward link from tail does not resolve")
            tail.prev_ref = None
            prev.next = None
            self._tail = prev
        self._size -= 1
        self._after_mutation()
        return tail.value

    def pop_front(self) -> T | None:
        """
        Remove and return the value at the head. O(1).

        Returns:
            The head's value, or None if the list is empty
        """
        head = self._head
        if head is None:
            return None

        following = head.next
        if following is None:
            self._head = None
            self._tail = None
        else:
            head.next = None
            following.prev_ref = None
            self._head = following
        self._size -= 1
        self._after_mutation()
        return head.value

    def peek_front(self) -> T | None:
        """Return the head's value without removing it, or None if empty."""
        return self._head.value if self._head is not None else None

    def peek_back(self) -> T | None:
        """Return the tail's value without removing it, or None if empty."""
        return self._tail.value if self._tail is not None else None

    def clear(self) -> int:
        """
        Remove every element. O(n).

        Nodes are unlinked one at a time walking forward from the head, so
        releasing a long chain never recurses.

        Returns:
            The number of nodes released
        """
        released = self._release_chain()
        logger.debug("Cleared %d nodes", released)
        self._after_mutation()
        return released

    def _release_chain(self) -> int:
        node = self._head
        self._head = None
        self._tail = None
        self._size = 0
        released = 0
        while node is not None:
            following = node.next
            node.next = None
            node.prev_ref = None
            node = following
            released += 1
        return released

    def check_invariants(self) -> None:
        """
        Audit the whole structure. O(n).

        Raises:
            InvariantViolationError: If any structural invariant is broken
        """
        check_invariants(self._head, self._tail, self._size)

    def _after_mutation(self) -> None:
        if self._validate:
            self.check_invariants()

    def __copy__(self) -> DoublyLinkedList[T]:
        """Return a list holding the same values in freshly allocated nodes."""
        duplicate = type(self)(validate=self._validate)
        node = self._head
        while node is not None:
            duplicate.push_back(node.value)
            node = node.next
        return duplicate

    def __deepcopy__(self, memo: dict[int, Any]) -> DoublyLinkedList[T]:
        duplicate = type(self)(validate=self._validate)
        memo[id(self)] = duplicate
        node = self._head
        while node is not None:
            duplicate.push_back(copy.deepcopy(node.value, memo))
            node = node.next
        return duplicate

    def __del__(self) -> None:
        # Nodes are never shared between lists; release them head to tail iteratively
        self._release_chain()

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"
