"""
Binary codec for the trie node store.

Layout of the uncompressed stream (little-endian):
  - node_count: int32 (4 bytes)
  - node_count x node record (107 bytes each, see lexitrie.node)

Files on disk hold this stream passed through a general-purpose
compressor (gzip by default). Node order is preserved exactly since child
links are raw indices.
"""

import bz2
import gzip
import logging
import lzma
import struct
import time
import zlib
from pathlib import Path
from typing import Callable, Dict, NamedTuple, Optional, Union

from lexitrie.errors import IndexFormatError
from lexitrie.node import NODE_SIZE, TrieNode
from lexitrie.trie import Trie

logger = logging.getLogger(__name__)

COUNT_FORMAT = "<i"
COUNT_SIZE = struct.calcsize(COUNT_FORMAT)  # Should be 4


# ============================================================================
# Compression
# ============================================================================

class Compressor(NamedTuple):
    """A lossless bytes-to-bytes codec pair."""
    compress: Callable[[bytes], bytes]
    decompress: Callable[[bytes], bytes]


def _identity(data: bytes) -> bytes:
    return data


COMPRESSORS: Dict[str, Compressor] = {
    'gzip': Compressor(lambda data: gzip.compress(data, compresslevel=9), gzip.decompress),
    'zlib': Compressor(lambda data: zlib.compress(data, 9), zlib.decompress),
    'bz2': Compressor(bz2.compress, bz2.decompress),
    'lzma': Compressor(lzma.compress, lzma.decompress),
    'none': Compressor(_identity, _identity),
}

DEFAULT_COMPRESSION = 'gzip'


def get_compressor(name: Optional[str] = None) -> Compressor:
    """
    Look up a compressor by name.

    Raises:
        ValueError: If name is not registered
    """
    if name is None:
        name = DEFAULT_COMPRESSION
    try:
        return COMPRESSORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown compression {name!r}. Choose from: {', '.join(sorted(COMPRESSORS))}"
        ) from None


# ============================================================================
# Serialization
# ============================================================================

def serialize(trie: Trie) -> bytes:
    """Flatten the node store to the uncompressed byte layout."""
    parts = [struct.pack(COUNT_FORMAT, trie.size)]
    parts.extend(trie.records())
    return b''.join(parts)


def deserialize(data: bytes) -> Trie:
    """
    Rebuild a trie from the uncompressed byte layout.

    Args:
        data: Bytes produced by serialize()

    Returns:
        A trie with the same nodes in the same order

    Raises:
        IndexFormatError: If the byte length, node count or a child index
            does not fit the layout
    """
    if len(data) < COUNT_SIZE:
        raise IndexFormatError(f"Index too short: {len(data)} bytes")

    count = struct.unpack_from(COUNT_FORMAT, data)[0]
    if count < 1:
        raise IndexFormatError(f"Invalid node count: {count}")

    expected = COUNT_SIZE + count * NODE_SIZE
    if len(data) != expected:
        raise IndexFormatError(
            f"Index holds {len(data)} bytes, expected {expected} for {count} nodes"
        )

    view = memoryview(data)
    nodes = []
    for offset in range(COUNT_SIZE, expected, NODE_SIZE):
        node = TrieNode.unpack(view[offset:offset + NODE_SIZE])
        for child in node.children:
            if child < 0 or child >= count:
                raise IndexFormatError(
                    f"Node {len(nodes)} links to index {child} outside 0..{count - 1}"
                )
        nodes.append(node)

    return Trie._adopt(nodes)


# ============================================================================
# Files
# ============================================================================

def save(trie: Trie, path: Union[str, Path], compression: Optional[str] = None) -> None:
    """Serialize, compress and write a trie to path."""
    path = Path(path)
    compressor = get_compressor(compression)

    start = time.perf_counter()
    payload = compressor.compress(serialize(trie))

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        f"Saved {trie.size:,} nodes ({trie.size_bytes:,} bytes) to {path} "
        f"as {len(payload):,} bytes in {elapsed:.1f}ms"
    )


def load(path: Union[str, Path], compression: Optional[str] = None) -> Trie:
    """
    Read, decompress and deserialize a trie from path.

    File and decompression errors propagate unchanged.

    Raises:
        IndexFormatError: If the decompressed stream is malformed
    """
    path = Path(path)
    compressor = get_compressor(compression)

    start = time.perf_counter()
    trie = deserialize(compressor.decompress(path.read_bytes()))

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(f"Loaded {trie.size:,} nodes from {path} in {elapsed:.1f}ms")

    return trie
