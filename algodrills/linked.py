"""Singly linked list nodes and merging of sorted lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = None


def list_from(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding values in order."""
    head: ListNode | None = None
    for val in reversed(list(values)):
        head = ListNode(val, head)
    return head


def values_of(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    result = []
    while head is not None:
        result.append(head.val)
        head = head.next
    return result


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one; on ties the node from l2 comes first."""
    anchor = ListNode()
    tail = anchor
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return anchor.next


def merge_k_lists(lists: Sequence[ListNode | None]) -> ListNode | None:
    """Merge sorted lists by pairwise divide and conquer."""
    if not lists:
        return None

    def merge_range(start: int, end: int) -> ListNode | None:
        if start == end:
            return lists[start]
        if start + 1 == end:
            return merge_two_lists(lists[start], lists[end])
        mid = start + (end - start) // 2
        return merge_two_lists(merge_range(start, mid), merge_range(mid + 1, end))

    return merge_range(0, len(lists) - 1)