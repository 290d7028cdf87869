"""
Array-backed word trie.

All nodes live in a single list (the node store). Index 0 is the root and
is created with the trie; child links are plain indices into the list, so
the whole structure can be flattened to bytes and rebuilt verbatim.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from lexitrie.errors import CorruptStateError
from lexitrie.node import NODE_SIZE, TrieNode

ROOT = 0


class Trie:
    """Case-insensitive membership index over ASCII words."""

    __slots__ = ("_nodes",)

    def __init__(self, nodes: Optional[Iterable[TrieNode]] = None):
        if nodes is None:
            self._nodes = [TrieNode()]
        else:
            self._nodes = _checked([node.copy() for node in nodes])

    @classmethod
    def _adopt(cls, nodes: List[TrieNode]) -> "Trie":
        """Take ownership of a freshly decoded node list without copying it."""
        trie = cls.__new__(cls)
        trie._nodes = _checked(nodes)
        return trie

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Trie":
        """Build a new trie holding every word in words."""
        trie = cls()
        trie.insert_all(words)
        return trie

    @classmethod
    def from_file(cls, path: Union[str, Path], compression: Optional[str] = None) -> "Trie":
        """Load a persisted trie. See codec.load."""
        from lexitrie.codec import load
        return load(path, compression=compression)

    def to_file(self, path: Union[str, Path], compression: Optional[str] = None) -> None:
        """Persist this trie. See codec.save."""
        from lexitrie.codec import save
        save(self, path, compression=compression)

    # ------------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of nodes, root included."""
        return len(self._nodes)

    @property
    def size_bytes(self) -> int:
        """Size of the node store in the fixed record encoding."""
        return len(self._nodes) * NODE_SIZE

    @property
    def nodes(self) -> Tuple[TrieNode, ...]:
        """Copies of the stored nodes, in index order."""
        return tuple(node.copy() for node in self._nodes)

    def records(self) -> Iterator[bytes]:
        """Yield the fixed-size record of each node, in index order."""
        for node in self._nodes:
            yield node.pack()

    # ------------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word.

        Existing prefixes are followed, never duplicated, so inserting the
        same word twice does not grow the store. The empty string is a no-op.

        Raises:
            OutOfRangeError: If word contains a non-letter character
        """
        if not word:
            return

        nodes = self._nodes
        current = nodes[ROOT]

        for c in word:
            index = current.get_child(c)
            if index == 0:
                child = TrieNode(label=c)
                nodes.append(child)
                current.set_child(c, len(nodes) - 1)
                current = child
            else:
                if not 0 < index < len(nodes):
                    raise CorruptStateError(
                        f"Child index {index} for {c!r} is outside the node store ({len(nodes)} nodes)"
                    )
                current = nodes[index]

        current.mark_word()

    def insert_substrings(self, word: str) -> None:
        """Insert every non-empty contiguous substring of word."""
        n = len(word)
        for i in range(n):
            for j in range(i + 1, n + 1):
                self.insert(word[i:j])

    def insert_all(self, words: Iterable[str]) -> int:
        """
        Insert each word from an iterable.

        Returns:
            Number of words consumed
        """
        count = 0
        for word in words:
            self.insert(word)
            count += 1
        return count

    # ------------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------------

    def contains(self, word: str) -> bool:
        """
        Check whether word was inserted.

        A prefix of an inserted word is not contained unless it was
        inserted itself. The empty string is never contained.

        Raises:
            OutOfRangeError: If a non-letter character is reached during the walk
            CorruptStateError: If a child link points outside the node store
        """
        if not word:
            return False

        nodes = self._nodes
        current = nodes[ROOT]

        for c in word:
            index = current.get_child(c)
            if index == 0:
                return False
            if not 0 < index < len(nodes):
                raise CorruptStateError(
                    f"Child index {index} for {c!r} is outside the node store ({len(nodes)} nodes)"
                )
            current = nodes[index]

        return current.is_word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __repr__(self) -> str:
        return f"Trie(size={self.size})"


def _checked(nodes: List[TrieNode]) -> List[TrieNode]:
    if not nodes:
        raise CorruptStateError("Node store must contain the root node")
    return nodes
