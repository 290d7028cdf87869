"""Line-oriented word list reader."""

import logging
import time
from pathlib import Path
from typing import Iterator, Union

from lexitrie.trie import Trie

logger = logging.getLogger(__name__)


def is_ascii_word(word: str) -> bool:
    """True if word is non-empty and made only of ASCII letters A-Z/a-z."""
    return word.isascii() and word.isalpha()


def iter_words(path: Union[str, Path], *, alpha_only: bool = True) -> Iterator[str]:
    """
    Yield one word per non-empty line of a text file.
    
    Args:
        path: Word list, one word per line
        alpha_only: Skip lines that contain anything but ASCII letters
        
    Yields:
        Stripped words in file order
    """
    # Undecodable bytes become U+FFFD and fail the ASCII check below
    with open(path, 'r', encoding='utf-8', errors='replace') as f:
        for lineno, line in enumerate(f, 1):
            word = line.strip()
            if not word:
                continue
            if alpha_only and not is_ascii_word(word):
                logger.debug(f"Skipping line {lineno} of {path}: {word!r}")
                continue
            yield word


def load_words(
    trie: Trie,
    path: Union[str, Path],
    *,
    substrings: bool = False,
    alpha_only: bool = True,
) -> int:
    """
    Insert every word of a word list into trie.
    
    Args:
        trie: Trie to fill
        path: Word list, one word per line
        substrings: Insert every substring of each word instead of the word
        alpha_only: Skip lines that contain anything but ASCII letters
        
    Returns:
        Number of words read
    """
    start = time.perf_counter()
    
    count = 0
    insert = trie.insert_substrings if substrings else trie.insert
    for word in iter_words(path, alpha_only=alpha_only):
        insert(word)
        count += 1
    
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"Read {count:,} words from {path} in {elapsed:.0f}ms ({trie.size:,} nodes)")
    
    return count
