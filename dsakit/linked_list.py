"""A singly linked list of nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of the list."""

    data: Any
    next: Node | None = None


def insert_at_head(head: Node | None, data: Any) -> Node:
    """Return a new head node holding data in front of the given list."""
    return Node(data, head)


def traverse(head: Node | None) -> Iterator[Any]:
    """Yield the data of each node from head to tail."""
    node = head
    while node is not None:
        yield node.data
        node = node.next