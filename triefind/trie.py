"""Prefix tree with exact, prefix and forgiving lookups."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """A single trie node, keyed in its parent by ``letter``."""

    letter: str = ""
    children: dict[str, Node] = field(default_factory=dict)
    is_word: bool = False

    def is_child_of(self, other: Node) -> bool:
        """Return True if this node hangs directly below ``other``."""
        return other.children.get(self.letter) is self

    def words_below(self, prefix: str) -> list[str]:
        """Return every word stored at or under this node, breadth first.

        ``prefix`` is the text spelled by the path from the root to this node.
        """
        results: list[str] = []
        queue: deque[tuple[Node, str]] = deque([(self, prefix)])
        while queue:
            node, text = queue.popleft()
            if node.is_word:
                results.append(text)
            queue.extend((child, text + letter) for letter, child in node.children.items())
        return results


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self) -> None:
        self.root = Node()

    def _walk(self, word: str) -> Node | None:
        current = self.root
        for char in word:
            child = current.children.get(char)
            if child is None:
                return None
            current = child
        return current

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        current = self.root
        for char in word:
            current = current.children.setdefault(char, Node(letter=char))
        current.is_word = True

    def contains_word(self, word: str) -> bool:
        """Return True if ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_word

    def contains_prefix(self, word: str) -> bool:
        """Return True if some inserted word starts with ``word``."""
        return self._walk(word) is not None

    def search(self, word: str) -> list[str]:
        """Return all inserted words that start with ``word``."""
        node = self._walk(word)
        return [] if node is None else node.words_below(word)

    def search_discarding_extra_letters(self, word: str, max_mistakes: int) -> list[str]:
        """Search for ``word``, skipping up to ``max_mistakes`` letters that lead nowhere.

        Letters with no matching child are dropped; once more than
        ``max_mistakes`` have been dropped the search gives up with no results.
        """
        mistakes = 0
        current = self.root
        used_prefix: list[str] = []
        for char in word:
            child = current.children.get(char)
            if child is not None:
                used_prefix.append(char)
                current = child
            else:
                mistakes += 1
                if mistakes > max_mistakes:
                    return []
        return current.words_below("".join(used_prefix))