"""Structural audit for DoublyLinkedList."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, NoReturn

from nodeseq.errors import InvariantViolationError

if TYPE_CHECKING:
    from nodeseq.linkedlist import Node

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    logger.error("Linked list invariant violated: %s", message)
    raise InvariantViolationError(message)


def check_invariants(
    head: Node[Any] | None,
    tail: Node[Any] | None,
    size: int,
) -> None:
    """
    Verify the structure anchored at head and tail.

    Walks forward from head and backward from tail. Each walk is bounded by
    size, so a corrupted chain containing a cycle is reported rather than
    looped over.

    Args:
        head: The list's head anchor
        tail: The list's tail anchor
        size: The element count the list has recorded

    Raises:
        InvariantViolationError: On the first broken invariant found
    """
    if (head is None) != (tail is None):
        _fail(f"head is {head!r} but tail is {tail!r}")
    if head is None or tail is None:
        if size != 0:
            _fail(f"empty anchors with recorded size {size}")
        return

    if head.prev_ref is not None:
        _fail("head has a backward link")
    if tail.next is not None:
        _fail("tail has a forward link")

    # Forward: every node's prev resolves to the node we came from
    previous: Node[Any] | None = None
    node: Node[Any] | None = head
    count = 0
    while node is not None:
        count += 1
        if count > size:
            _fail(f"forward walk exceeds recorded size {size}")
        if previous is not None:
            if node.prev_ref is None:
                _fail(f"interior node #{count} has no backward link")
            if node.prev is not previous:
                _fail(f"backward link of node #{count} does not resolve to its predecessor")
        previous = node
        node = node.next
    if previous is not tail:
        _fail("forward walk from head does not end at tail")
    if count != size:
        _fail(f"forward walk counted {count} nodes, recorded size is {size}")

    # Backward
    node = tail
    count = 0
    while node is not None:
        count += 1
        if count > size:
            _fail(f"backward walk exceeds recorded size {size}")
        if node.prev_ref is None:
            break
        node = node.prev
        if node is None:
            _fail(f"backward link of node #{count} from tail is dangling")
    if node is not head:
        _fail("backward walk from tail does not end at head")
    if count != size:
        _fail(f"backward walk counted {count} nodes, recorded size is {size}")
