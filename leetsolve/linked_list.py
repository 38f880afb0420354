"""Singly linked lists of decimal digits and their addition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding values in order; None for no values."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(node: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if node is None else list(node)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored least significant digit first."""
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


def add_two_numbers_recursive(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two digit lists recursively, carrying between calls."""
    return _add(l1, l2, 0)


def _add(l1: Optional[ListNode], l2: Optional[ListNode], carry: int) -> Optional[ListNode]:
    if l1 is None and l2 is None and not carry:
        return None
    total = carry
    if l1 is not None:
        total += l1.val
    if l2 is not None:
        total += l2.val
    return ListNode(
        total % 10,
        _add(
            l1.next if l1 is not None else None,
            l2.next if l2 is not None else None,
            total // 10,
        ),
    )