"""
Trie node encoding.

A node holds its label character, a word-terminator flag and 26 child
slots, one per letter A-Z. Child slots hold indices into the node store;
0 means "no child" since index 0 is always the root.

Fixed on-disk record (no padding, no length prefix):
  - label: uint16 (2 bytes) - UTF-16 code unit of the label character
  - terminator: uint8 (1 byte) - 0 or 1
  - children: 26 x int32 (104 bytes) - child node indices

Total: 107 bytes per node, little-endian.
"""

import struct
import string
from dataclasses import dataclass, field
from typing import List

from lexitrie.errors import OutOfRangeError

# ============================================================================
# Record Schema
# ============================================================================

ALPHABET_SIZE = 26

NODE_FORMAT = "<HB26i"
NODE_SIZE = struct.calcsize(NODE_FORMAT)  # Should be 107
_NODE_STRUCT = struct.Struct(NODE_FORMAT)

ROOT_LABEL = "\x00"

# Both cases map onto the same slot
_SLOTS = {ch: i for i, ch in enumerate(string.ascii_uppercase)}
_SLOTS.update({ch: i for i, ch in enumerate(string.ascii_lowercase)})


def letter_to_slot(c: str) -> int:
    """
    Map an ASCII letter to its child slot.
    
    Args:
        c: A single character, either case
        
    Returns:
        Slot number in [0, 26)
        
    Raises:
        OutOfRangeError: If c is not an ASCII letter
    """
    try:
        return _SLOTS[c]
    except (KeyError, TypeError):
        raise OutOfRangeError(
            f"Character out of range: {c!r}. Only ASCII letters A-Z are allowed."
        ) from None


@dataclass(slots=True)
class TrieNode:
    """
    One node of the array-backed trie.
    
    Attributes:
        label: The letter this node was created for (unused by traversal)
        is_word: True if an inserted word ends at this node
        children: Child node index per letter slot, 0 if absent
    """
    label: str = ROOT_LABEL
    is_word: bool = False
    children: List[int] = field(default_factory=lambda: [0] * ALPHABET_SIZE)
    
    def get_child(self, c: str) -> int:
        """Get the child index for letter c (0 if absent)."""
        return self.children[letter_to_slot(c)]
    
    def set_child(self, c: str, index: int) -> None:
        """Point the slot for letter c at node index."""
        self.children[letter_to_slot(c)] = index
    
    def has_child(self, c: str) -> bool:
        """True if a child exists for letter c."""
        return self.children[letter_to_slot(c)] != 0
    
    def mark_word(self) -> None:
        """Mark this node as the end of a word."""
        self.is_word = True
    
    def copy(self) -> "TrieNode":
        """Return an independent copy, children included."""
        return TrieNode(label=self.label, is_word=self.is_word, children=list(self.children))
    
    def pack(self) -> bytes:
        """Encode this node as a fixed 107-byte record."""
        return _NODE_STRUCT.pack(ord(self.label), 1 if self.is_word else 0, *self.children)
    
    @classmethod
    def unpack(cls, record) -> "TrieNode":
        """Decode a node from a 107-byte record."""
        label, marker, *children = _NODE_STRUCT.unpack(record)
        return cls(label=chr(label), is_word=marker > 0, children=children)


