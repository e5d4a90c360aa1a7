"""Tests for the structural invariant audit."""

import logging
import weakref

import pytest

from nodeseq import DoublyLinkedList, InvariantViolationError, Node, check_invariants


def _endpoint_checks(lst: DoublyLinkedList[int]) -> None:
    """Exactly one node lacks prev and one lacks next, and they are the anchors."""
    head, tail = lst._head, lst._tail
    if not lst:
        assert head is None and tail is None
        return
    assert head is not None and tail is not None

    no_prev: list[Node[int]] = []
    no_next: list[Node[int]] = []
    node: Node[int] | None = head
    while node is not None:
        if node.prev_ref is None:
            no_prev.append(node)
        if node.next is None:
            no_next.append(node)
        node = node.next
    assert no_prev == [head]
    assert no_next == [tail]


def test_empty_list_passes() -> None:
    """Test that an empty list satisfies the invariants."""
    DoublyLinkedList[int]().check_invariants()
    check_invariants(None, None, 0)


def test_invariants_after_every_operation() -> None:
    """Test the endpoint invariants after each operation of a mixed run."""
    lst = DoublyLinkedList[int]()
    operations = [
        lambda: lst.push_back(1),
        lambda: lst.push_front(0),
        lambda: lst.push_back(2),
        lambda: lst.pop_front(),
        lambda: lst.push_front(5),
        lambda: lst.pop_back(),
        lambda: lst.pop_back(),
        lambda: lst.pop_front(),
        lambda: lst.pop_front(),
        lambda: lst.push_back(3),
    ]
    for operation in operations:
        operation()
        lst.check_invariants()
        _endpoint_checks(lst)


def test_validate_mode_audits_pushes_and_pops() -> None:
    """Test that validate=True runs without error on well-formed usage."""
    lst = DoublyLinkedList(range(10), validate=True)
    lst.push_front(-1)
    lst.pop_back()
    lst.pop_front()
    lst.clear()


def test_anchor_mismatch_detected() -> None:
    """Test that a head without a tail is reported."""
    with pytest.raises(InvariantViolationError, match="tail"):
        check_invariants(Node(1), None, 1)


def test_size_mismatch_detected() -> None:
    """Test that a wrong recorded size is reported."""
    lst = DoublyLinkedList([1, 2, 3])
    lst._size = 2
    with pytest.raises(InvariantViolationError):
        lst.check_invariants()

    lst._size = 4
    with pytest.raises(InvariantViolationError):
        lst.check_invariants()


def test_empty_with_nonzero_size_detected() -> None:
    """Test that empty anchors with a nonzero size are reported."""
    with pytest.raises(InvariantViolationError):
        check_invariants(None, None, 1)


def test_head_with_backward_link_detected() -> None:
    """Test that a head whose prev is set is reported."""
    lst = DoublyLinkedList([1, 2])
    assert lst._head is not None and lst._tail is not None
    lst._head.prev_ref = weakref.ref(lst._tail)
    with pytest.raises(InvariantViolationError, match="head"):
        lst.check_invariants()


def test_inconsistent_backward_link_detected() -> None:
    """Test that a prev pointing at the wrong node is reported."""
    lst = DoublyLinkedList([1, 2, 3])
    assert lst._head is not None and lst._tail is not None
    lst._tail.prev_ref = weakref.ref(lst._head)
    with pytest.raises(InvariantViolationError):
        lst.check_invariants()


def test_missing_backward_link_detected() -> None:
    """Test that an interior node without prev is reported."""
    lst = DoublyLinkedList([1, 2, 3])
    assert lst._head is not None
    middle = lst._head.next
    assert middle is not None
    middle.prev_ref = None
    with pytest.raises(InvariantViolationError):
        lst.check_invariants()


def test_forward_cycle_detected() -> None:
    """Test that a cycle in the next chain is reported instead of looping."""
    lst = DoublyLinkedList([1, 2, 3])
    assert lst._head is not None and lst._tail is not None
    lst._tail.next = lst._head
    with pytest.raises(InvariantViolationError):
        lst.check_invariants()
    # Break the cycle again so the nodes are freed
    lst._tail.next = None


def test_violation_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a violation is logged at ERROR before being raised."""
    with caplog.at_level(logging.ERROR, logger="nodeseq.invariants"):
        with pytest.raises(InvariantViolationError):
            check_invariants(None, None, 3)
    assert any("invariant violated" in record.getMessage() for record in caplog.records)


def test_violation_is_an_assertion_error() -> None:
    """Test that the violation error is catchable as AssertionError."""
    with pytest.raises(AssertionError):
        check_invariants(None, Node(1), 1)


def test_validation_and_clear_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test the DEBUG records for validated creation and clear."""
    with caplog.at_level(logging.DEBUG, logger="nodeseq.linkedlist"):
        lst = DoublyLinkedList(range(4), validate=True)
        lst.clear()

    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "nodeseq.linkedlist" and record.levelno == logging.DEBUG
    ]
    assert "Created DoublyLinkedList with invariant validation enabled" in messages
    assert "Cleared 4 nodes" in messages


def test_creation_without_validation_is_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test that plain lists log nothing on creation."""
    with caplog.at_level(logging.DEBUG, logger="nodeseq.linkedlist"):
        DoublyLinkedList(range(4))

    assert not [record for record in caplog.records if record.name == "nodeseq.linkedlist"]
