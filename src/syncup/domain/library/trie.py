"""
Prefix index for autocomplete.

Every node keeps the references of all words that pass through it, so a
prefix query is a walk of len(prefix) steps with no subtree traversal. A node
counts how many inserted words carry each reference through it. That count
lets remove() undo one word without dropping a reference that another word
still needs (e.g. the title "Pop Hits" indexed under both "pop hits" and the
genre "pop").
"""

from typing import Optional

from .normalize import fold_case


class _TrieNode:
    __slots__ = ("children", "references", "word_ends")

    def __init__(self) -> None:
        self.children: dict[str, "_TrieNode"] = {}
        # reference -> number of inserted words carrying it through this node.
        # Dict order is first-insertion order, which is the result order.
        self.references: dict[str, int] = {}
        # References whose word ends exactly at this node
        self.word_ends: set[str] = set()


class Trie:
    """Case-insensitive prefix tree mapping words to lists of references."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: Optional[str], reference: Optional[str]) -> None:
        """Index `reference` under every prefix of `word`.

        Inserting the same (word, reference) pair again changes nothing.
        Empty words and None references are ignored.
        """
        if not word or reference is None:
            return

        folded = fold_case(word)

        # Idempotence check first so counts are only bumped once per pair
        end = self._find(folded)
        if end is not None and reference in end.word_ends:
            return

        node = self._root
        for ch in folded:
            node = node.children.setdefault(ch, _TrieNode())
            node.references[reference] = node.references.get(reference, 0) + 1
        node.word_ends.add(reference)

    def search_by_prefix(self, prefix: Optional[str]) -> list[str]:
        """Return all references indexed under `prefix`, in insertion order.

        The empty prefix returns an empty list, not the whole corpus.
        """
        if not prefix:
            return []

        node = self._find(fold_case(prefix))
        if node is None:
            return []
        return list(node.references)

    def remove(self, word: Optional[str], reference: Optional[str]) -> bool:
        """Undo one insert(word, reference).

        Returns:
            True if the pair was indexed and has been removed
        """
        if not word or reference is None:
            return False

        folded = fold_case(word)
        path: list[tuple[_TrieNode, str, _TrieNode]] = []
        node = self._root
        for ch in folded:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch, child))
            node = child

        if reference not in node.word_ends:
            return False
        node.word_ends.discard(reference)

        for _, _, child in path:
            remaining = child.references[reference] - 1
            if remaining:
                child.references[reference] = remaining
            else:
                del child.references[reference]

        # A node without references has no words below it
        for parent, ch, child in reversed(path):
            if child.references:
                break
            del parent.children[ch]

        return True

    def clear(self) -> None:
        """Drop every indexed word."""
        self._root = _TrieNode()

    def _find(self, folded: str) -> Optional[_TrieNode]:
        node = self._root
        for ch in folded:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
