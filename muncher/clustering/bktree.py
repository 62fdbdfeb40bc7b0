"""
Burkhard-Keller tree over text labels.

Each node keeps children keyed by their distance to the node's label, so a
bounded search can skip every child whose key falls outside
[d - max_distance, d + max_distance].
"""

from __future__ import annotations

from typing import Iterator, Optional

from .distance import DistanceFn, damerau_levenshtein


class BKNode:
    """A label and its distance-keyed children."""

    __slots__ = ("label", "children")

    def __init__(self, label: str):
        self.label = label
        self.children: dict[int, BKNode] = {}

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "children": {d: child.to_dict() for d, child in self.children.items()},
        }


class BKTree:
    """
    Metric index supporting insertion and bounded-radius search.

    Insert-only: nodes are never removed or rebalanced. Not safe for
    concurrent mutation.
    """

    def __init__(self, distance: DistanceFn = damerau_levenshtein):
        self.distance = distance
        self.root: Optional[BKNode] = None
        self._size = 0

    def insert(self, label: str) -> None:
        """
        Insert a label. Duplicates are not merged here.

        The first label becomes the root; later labels descend through the
        child at their exact distance until a free slot is found.
        """
        if self.root is None:
            self.root = BKNode(label)
            self._size = 1
            return

        node = self.root
        while True:
            d = self.distance(node.label, label)
            child = node.children.get(d)
            if child is None:
                node.children[d] = BKNode(label)
                self._size += 1
                return
            node = child

    def search(self, target: str, max_distance: int) -> list[str]:
        """
        Find every label within max_distance of target.

        Args:
            target: Label to match against
            max_distance: Inclusive distance bound

        Returns:
            Matching labels in pre-order (parent first, children in
            insertion order). Empty list for an empty tree.
        """
        if self.root is None:
            return []

        results = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            d = self.distance(node.label, target)
            if d <= max_distance:
                results.append(node.label)

            lower_bound = d - max_distance
            upper_bound = d + max_distance
            # Reversed so children pop in insertion order
            for child_distance, child in reversed(list(node.children.items())):
                if lower_bound <= child_distance <= upper_bound:
                    stack.append(child)

        return results

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Labels in pre-order."""
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node.label
            stack.extend(reversed(list(node.children.values())))

    def __contains__(self, label: str) -> bool:
        return label in self.search(label, 0)

    def to_dict(self) -> Optional[dict]:
        """Structural snapshot: labels and distance keys, nested."""
        if self.root is None:
            return None
        return self.root.to_dict()
