"""
lexitrie: Compact word-membership index

An array-backed trie over case-insensitive ASCII words, with a compressed
binary file format so a large word list is built once and reloaded fast.

Basic Usage:
    import lexitrie

    trie = lexitrie.Trie.from_words(["apple", "Banana"])
    trie.contains("APPLE")     # True
    trie.contains("app")       # False

    lexitrie.save(trie, "words.trie.gz")
    trie = lexitrie.load("words.trie.gz")
"""

import time
from pathlib import Path
from typing import Optional, Tuple, Union

from lexitrie.codec import (
    COMPRESSORS,
    DEFAULT_COMPRESSION,
    deserialize,
    load,
    save,
    serialize,
)
from lexitrie.errors import (
    CorruptStateError,
    IndexFormatError,
    OutOfRangeError,
    TrieError,
)
from lexitrie.node import NODE_SIZE, TrieNode, letter_to_slot
from lexitrie.trie import Trie

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def build_index(
    wordlist: Union[str, Path],
    output: Union[str, Path],
    substrings: bool = False,
    compression: Optional[str] = None,
) -> Trie:
    """
    Build a trie from a word list and persist it.

    Args:
        wordlist: Text file with one word per line
        output: Where to write the compressed index
        substrings: Index every substring of each word
        compression: Compressor name (default: gzip)

    Returns:
        The built Trie

    Example:
        >>> trie = lexitrie.build_index("words_alpha.txt", "words.trie.gz")
        >>> trie.contains("abash")
        True
    """
    from lexitrie.wordlist import load_words

    trie = Trie()
    load_words(trie, wordlist, substrings=substrings)
    save(trie, output, compression=compression)
    return trie


def warm_up(path: Optional[Union[str, Path]] = None, verbose: bool = False) -> Tuple[float, dict]:
    """
    Load the default index ahead of the first lookup.

    Once an index is loaded it stays loaded, so calling warm_up again with
    the same (or no) path is cheap. A different path raises ValueError
    until lexitrie.index.unload_index() is called.

    Args:
        path: Index file to load. Uses the default path if not specified.
        verbose: If True, print timing information

    Returns:
        Tuple of (seconds, {'index': ms, 'nodes': count})

    Raises:
        FileNotFoundError: If the index file doesn't exist
        ValueError: If a different index file is already loaded
    """
    from lexitrie.index import get_loaded_path, load_index

    start = time.perf_counter()
    trie = load_index(path)
    seconds = time.perf_counter() - start

    details = {'index': seconds * 1000, 'nodes': trie.size}
    if verbose:
        print(
            f"lexitrie index {get_loaded_path()}: {trie.size:,} nodes "
            f"ready in {details['index']:.1f}ms"
        )

    return seconds, details


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Core
    "Trie",
    "TrieNode",
    "letter_to_slot",
    "NODE_SIZE",
    # Codec
    "serialize",
    "deserialize",
    "save",
    "load",
    "COMPRESSORS",
    "DEFAULT_COMPRESSION",
    # Helpers
    "build_index",
    "warm_up",
    "get_version",
    # Exceptions
    "TrieError",
    "OutOfRangeError",
    "CorruptStateError",
    "IndexFormatError",
    # Version
    "__version__",
]
