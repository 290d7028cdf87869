"""
Process-wide default word index.

Loads a persisted trie once and keeps it for the lifetime of the process,
so callers can ask membership questions without passing a Trie around.
"""

from pathlib import Path
from typing import Optional, Union

from lexitrie.codec import load
from lexitrie.trie import Trie

# Module-level singleton
_INDEX: Optional[Trie] = None
_INDEX_PATH: Optional[Path] = None


def get_index_path() -> Path:
    """Get the default index path."""
    return Path(__file__).parent / "data" / "words.trie.gz"


def is_index_loaded() -> bool:
    """Check if the index is loaded."""
    return _INDEX is not None


def get_loaded_path() -> Optional[Path]:
    """Get the path the index was loaded from, None if not loaded."""
    return _INDEX_PATH


def load_index(path: Optional[Union[str, Path]] = None) -> Trie:
    """
    Load the persisted index.
    
    Subsequent calls return the already loaded trie. Asking for a
    different file while one is loaded is an error; call unload_index()
    first to switch.
    
    Args:
        path: Path to the index file. Uses default if not specified.
        
    Returns:
        The loaded Trie
        
    Raises:
        FileNotFoundError: If the index file doesn't exist
        ValueError: If another index file is already loaded
    """
    global _INDEX, _INDEX_PATH
    
    if _INDEX is not None:
        if path is not None and Path(path).resolve() != _INDEX_PATH:
            raise ValueError(
                f"Index already loaded from {_INDEX_PATH}; unload it before loading {path}"
            )
        return _INDEX
    
    path = get_index_path() if path is None else Path(path)
    
    if not path.exists():
        raise FileNotFoundError(
            f"Index not found at {path}. "
            f"Run 'lexitrie build WORDLIST -o {path}' to build it."
        )
    
    _INDEX = load(path)
    _INDEX_PATH = path.resolve()
    
    return _INDEX


def contains(word: str) -> bool:
    """Check if a word exists in the default index."""
    if _INDEX is None:
        load_index()
    
    return _INDEX.contains(word)


def get_index_size() -> int:
    """Get the number of nodes in the index, 0 if not loaded."""
    if _INDEX is None:
        return 0
    
    return _INDEX.size


def unload_index():
    """Unload the index to free memory."""
    global _INDEX, _INDEX_PATH
    _INDEX = None
    _INDEX_PATH = None
