"""Singly linked lists of digits and their addition."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None


def _values(head: Optional[ListNode]) -> Iterator[int]:
    while head is not None:
        yield head.val
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link ``values`` in order; ``None`` for no values."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: Optional[ListNode]) -> list[int]:
    """The values of a linked list, head first."""
    return list(_values(head))


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored least significant digit first.

    If one list is empty the other is returned as it is.
    """
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    digits: list[int] = []
    carry = 0
    for first, second in zip_longest(_values(l1), _values(l2), fillvalue=0):
        carry, digit = divmod(first + second + carry, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    return build_list(digits)


def add_two_numbers_carry(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers digit by digit, always building a fresh list."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next