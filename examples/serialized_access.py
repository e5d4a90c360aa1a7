"""Sharing one list between asyncio tasks behind a single lock."""

import asyncio
import random

from nodeseq import DoublyLinkedList


async def producer(
    seq: DoublyLinkedList[int],
    lock: asyncio.Lock,
    start: int,
    count: int,
) -> None:
    """
    Push values to a random end of the shared list.

    Args:
        seq: The shared list
        lock: Lock guarding every access to seq
        start: First value to push
        count: Number of values to push
    """
    for value in range(start, start + count):
        async with lock:
            if random.random() < 0.5:
                seq.push_front(value)
            else:
                seq.push_back(value)
        await asyncio.sleep(0.001)


async def consumer(seq: DoublyLinkedList[int], lock: asyncio.Lock, name: str) -> int:
    """Drain the list from the back until it stays empty."""
    consumed = 0
    idle = 0
    while idle < 5:
        async with lock:
            value = seq.pop_back()
        if value is None:
            idle += 1
        else:
            idle = 0
            consumed += 1
        await asyncio.sleep(0.002)
    print(f"[{name}] consumed {consumed} values")
    return consumed


async def main() -> None:
    """Run producers and consumers against one list."""
    print("=== Serialized access from multiple tasks ===\n")

    # The list does no locking of its own
    seq = DoublyLinkedList[int](validate=True)
    lock = asyncio.Lock()

    results = await asyncio.gather(
        producer(seq, lock, 0, 20),
        producer(seq, lock, 100, 20),
        consumer(seq, lock, "consumer-1"),
        consumer(seq, lock, "consumer-2"),
    )

    async with lock:
        leftover = seq.clear()
    print(f"\nTotal consumed: {sum(results[2:])}, left over: {leftover}")


if __name__ == "__main__":
    asyncio.run(main())
