import gzip
import random
import struct

import marisa_trie
import pytest

from lexitrie import Trie
from lexitrie.codec import (
    COMPRESSORS,
    deserialize,
    get_compressor,
    load,
    save,
    serialize,
)
from lexitrie.errors import IndexFormatError
from lexitrie.node import NODE_SIZE


def test_serialize_layout():
    trie = Trie.from_words(["as"])
    data = serialize(trie)

    assert len(data) == 4 + 3 * NODE_SIZE
    assert struct.unpack_from("<i", data)[0] == 3

    root = data[4:4 + NODE_SIZE]
    assert root[0:2] == b"\x00\x00"
    assert root[2] == 0
    # slot for 'a' points at node 1
    assert struct.unpack_from("<i", root, 3)[0] == 1

    last = data[4 + 2 * NODE_SIZE:]
    assert last[0:2] == b"s\x00"
    assert last[2] == 1


def test_serialize_is_deterministic(words):
    a = Trie.from_words(words)
    b = Trie.from_words(words)
    assert serialize(a) == serialize(b)


def test_deserialize_preserves_nodes(words):
    trie = Trie.from_words(words)
    restored = deserialize(serialize(trie))

    assert restored.size == trie.size
    assert restored.nodes == trie.nodes


def test_deserialize_accepts_bytearray():
    data = bytearray(serialize(Trie.from_words(["hi"])))
    assert deserialize(data).contains("hi")


@pytest.mark.parametrize("data", [b"", b"\x01\x00"])
def test_deserialize_too_short(data):
    with pytest.raises(IndexFormatError):
        deserialize(data)


def test_deserialize_bad_count():
    with pytest.raises(IndexFormatError):
        deserialize(struct.pack("<i", 0))
    with pytest.raises(IndexFormatError):
        deserialize(struct.pack("<i", -3))


def test_deserialize_truncated():
    data = serialize(Trie.from_words(["abc"]))
    with pytest.raises(IndexFormatError):
        deserialize(data[:-1])
    with pytest.raises(IndexFormatError):
        deserialize(data + b"\x00")


def test_deserialize_child_out_of_range():
    data = bytearray(serialize(Trie.from_words(["a"])))
    # root slot 'b' -> node 99
    struct.pack_into("<i", data, 4 + 3 + 4, 99)
    with pytest.raises(IndexFormatError):
        deserialize(bytes(data))


@pytest.mark.parametrize("compression", sorted(COMPRESSORS))
def test_file_round_trip(tmp_path, words, compression):
    trie = Trie.from_words(words)
    path = tmp_path / "index.bin"

    save(trie, path, compression=compression)
    restored = load(path, compression=compression)

    assert restored.size == trie.size
    assert all(restored.contains(w) for w in words)


def test_default_file_is_gzip(tmp_path):
    trie = Trie.from_words(["gzip", "stream"])
    path = tmp_path / "trie.gz"
    save(trie, path)

    assert gzip.decompress(path.read_bytes()) == serialize(trie)
    assert path.stat().st_size < trie.size_bytes


def test_save_creates_parent_dirs(tmp_path):
    path = tmp_path / "nested" / "dir" / "trie.gz"
    save(Trie.from_words(["x"]), path)
    assert load(path).contains("x")


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing.gz")


def test_load_corrupt_stream_propagates(tmp_path):
    path = tmp_path / "trie.gz"
    path.write_bytes(b"definitely not gzip")
    with pytest.raises(gzip.BadGzipFile):
        load(path)


def test_load_truncated_stream_propagates(tmp_path):
    path = tmp_path / "trie.gz"
    save(Trie.from_words(["truncate", "me"]), path)
    path.write_bytes(path.read_bytes()[:20])
    with pytest.raises(EOFError):
        load(path)


def test_unknown_compression():
    with pytest.raises(ValueError):
        get_compressor("snappy")


def test_trie_file_helpers(tmp_path):
    path = tmp_path / "trie.gz"
    Trie.from_words(["abash", "abjectedness", "bounteousness"]).to_file(path)

    trie = Trie.from_file(path)
    assert trie.contains("abash")
    assert trie.contains("abjectedness")
    assert trie.contains("bounteousness")
    assert not trie.contains("bounteous")


def test_persisted_word_list_matches_reference(tmp_path, words):
    trie = Trie.from_words(words)
    path = tmp_path / "trie.gz"
    save(trie, path)
    restored = load(path)

    reference = marisa_trie.Trie(words)
    rng = random.Random(99)
    sample = rng.sample(words, 200)
    sample += ["".join(rng.choice("abcdefghijklmnopqrstuvwxyz") for _ in range(rng.randint(1, 14)))
               for _ in range(500)]

    for word in sample:
        assert restored.contains(word) == (word in reference)
        assert restored.contains(word.upper()) == (word in reference)
