"""
BK-tree (Burkhard-Keller) for typo-tolerant lookup.

Keys are the composed "title artist genre" strings of the catalog, compared
with the Levenshtein distance. Children hang off their parent by their exact
distance to it, so a query for distance <= d at a node whose key is `dist`
away only has to visit children with edge labels in [dist - d, dist + d]
(triangle inequality).
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein

from .normalize import fold_case


def levenshtein(a: Optional[str], b: Optional[str]) -> int:
    """Unit-cost edit distance between two ASCII-folded strings.

    Examples:
        >>> levenshtein("", "abc")
        3
        >>> levenshtein("Kitten", "sitting")
        3
    """
    return Levenshtein.distance(fold_case(a), fold_case(b))


class _BKNode:
    __slots__ = ("key", "references", "children")

    def __init__(self, key: str, reference: str) -> None:
        self.key = key
        self.references: list[str] = [reference]
        self.children: dict[int, "_BKNode"] = {}


class BKTree:
    """Metric tree of keys, each carrying a list of references."""

    def __init__(self) -> None:
        self._root: Optional[_BKNode] = None

    def insert(self, key: Optional[str], reference: Optional[str]) -> None:
        """Index `reference` under `key`.

        A key that is already present (distance 0) collects the reference on
        its existing node. Empty keys and None references are ignored.
        """
        if not key or reference is None:
            return

        key = fold_case(key)

        if self._root is None:
            self._root = _BKNode(key, reference)
            return

        node = self._root
        while True:
            dist = levenshtein(key, node.key)
            if dist == 0:
                if reference not in node.references:
                    node.references.append(reference)
                return

            child = node.children.get(dist)
            if child is None:
                node.children[dist] = _BKNode(key, reference)
                return
            node = child

    def search_similar(self, query: Optional[str], max_distance: int) -> list[str]:
        """Return references of every key within `max_distance` of `query`.

        Results come in depth-first visit order. Each key lives on exactly one
        node, so no reference is reported twice for the same key.
        """
        if self._root is None or not query or max_distance < 0:
            return []

        query = fold_case(query)
        results: list[str] = []

        # Explicit stack; children pushed in reverse to keep pre-order
        stack = [self._root]
        while stack:
            node = stack.pop()
            dist = levenshtein(query, node.key)
            if dist <= max_distance:
                results.extend(node.references)

            low, high = dist - max_distance, dist + max_distance
            for edge in reversed(list(node.children)):
                if low <= edge <= high:
                    stack.append(node.children[edge])

        return results

    def remove(self, key: Optional[str], reference: Optional[str]) -> bool:
        """Drop `reference` from the node holding exactly `key`.

        The node stays in the tree even when it runs out of references,
        because its children are placed by their distance to it.

        Returns:
            True if the reference was found and removed
        """
        if not key or reference is None:
            return False

        key = fold_case(key)
        node = self._root
        while node is not None:
            dist = levenshtein(key, node.key)
            if dist == 0:
                if reference in node.references:
                    node.references.remove(reference)
                    return True
                return False
            node = node.children.get(dist)
        return False

    def clear(self) -> None:
        """Drop every key."""
        self._root = None
