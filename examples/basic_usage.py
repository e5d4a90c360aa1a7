"""Basic usage example for nodeseq."""

import logging

from nodeseq import DoublyLinkedList


def main() -> None:
    """Demonstrate pushing and popping at both ends."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    # Validation audits the whole structure after every change
    seq = DoublyLinkedList[int](validate=True)

    print("=== Pushing to both ends ===\n")
    seq.push_back(1)
    seq.push_front(0)
    seq.push_back(2)
    print(f"Size: {len(seq)}")
    print(f"Front: {seq.peek_front()}, back: {seq.peek_back()}\n")

    print("=== Popping from both ends ===\n")
    print(f"pop_front -> {seq.pop_front()}")
    print(f"pop_back  -> {seq.pop_back()}")
    print(f"pop_front -> {seq.pop_front()}")

    # Empty pops are normal, not errors
    print(f"pop_front -> {seq.pop_front()}")
    print(f"pop_back  -> {seq.pop_back()}\n")

    seq = DoublyLinkedList(range(1000))
    print(f"Released {seq.clear()} nodes")


if __name__ == "__main__":
    main()
