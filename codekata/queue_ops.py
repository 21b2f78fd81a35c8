"""Queue manipulation."""

from __future__ import annotations

from collections import deque
from typing import Iterable, TypeVar

T = TypeVar("T")


def reverse_first_k(items: Iterable[T], k: int) -> list[T]:
    """Reverse the first ``k`` items of a queue, keeping the rest in order.

    Raises ValueError if the queue is empty or ``k`` is outside ``0..len``.
    """
    queue = deque(items)
    if not queue:
        raise ValueError("queue is empty")
    if k < 0 or k > len(queue):
        raise ValueError(f"k must be between 0 and {len(queue)}, got {k}")
    head = [queue.popleft() for _ in range(k)]
    queue.extendleft(head)
    return list(queue)