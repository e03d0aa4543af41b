"""Singly linked lists and in-place algorithms on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from ``values``; return its head, or None if empty."""
        head = None
        for val in reversed(list(values)):
            head = cls(val, head)
        return head

    def values(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        out = []
        node: Optional[ListNode] = self
        while node is not None:
            out.append(node.val)
            node = node.next
        return out


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways; the list is left intact."""
    if head is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse_list(slow.next)
    result = True
    left, right = head, second
    while right is not None:
        if left.val != right.val:
            result = False
            break
        left, right = left.next, right.next
    slow.next = reverse_list(second)
    return result


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list and return its head.

    On equal values nodes of ``list1`` come first.
    """
    anchor = ListNode()
    tail = anchor
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return anchor.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node from the end and return the head.

    If the list is shorter than ``n`` it is returned unchanged.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    lead = head
    for _ in range(n):
        if lead is None:
            return head
        lead = lead.next
    if lead is None:
        return head.next
    trail = head
    while lead.next is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return head