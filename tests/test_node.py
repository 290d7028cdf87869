import struct

import pytest

from lexitrie.errors import OutOfRangeError
from lexitrie.node import ALPHABET_SIZE, NODE_FORMAT, NODE_SIZE, TrieNode, letter_to_slot


def test_record_is_107_bytes():
    assert NODE_SIZE == 107
    assert struct.calcsize(NODE_FORMAT) == 2 + 1 + 26 * 4


@pytest.mark.parametrize("c,slot", [("A", 0), ("a", 0), ("Z", 25), ("z", 25), ("m", 12)])
def test_letter_to_slot(c, slot):
    assert letter_to_slot(c) == slot


@pytest.mark.parametrize("c", ["@", "[", "`", "{", "1", " ", "-", "é", "ß", "", "ab"])
def test_letter_to_slot_out_of_range(c):
    with pytest.raises(OutOfRangeError):
        letter_to_slot(c)


def test_out_of_range_is_value_error():
    with pytest.raises(ValueError):
        letter_to_slot("!")


def test_new_node_is_empty():
    node = TrieNode()
    assert not node.is_word
    assert node.children == [0] * ALPHABET_SIZE
    assert not any(node.has_child(c) for c in "abcdefghijklmnopqrstuvwxyz")


def test_nodes_do_not_share_children():
    a, b = TrieNode(), TrieNode()
    a.set_child("x", 3)
    assert b.get_child("x") == 0


def test_set_and_get_child_fold_case():
    node = TrieNode()
    node.set_child("q", 7)
    assert node.get_child("Q") == 7
    assert node.has_child("q")
    assert not node.has_child("r")


def test_child_access_rejects_non_letters():
    node = TrieNode()
    with pytest.raises(OutOfRangeError):
        node.get_child("3")
    with pytest.raises(OutOfRangeError):
        node.set_child(".", 1)
    with pytest.raises(OutOfRangeError):
        node.has_child(" ")


def test_mark_word_is_idempotent():
    node = TrieNode(label="a")
    node.mark_word()
    node.mark_word()
    assert node.is_word


def test_pack_layout():
    node = TrieNode(label="B")
    node.mark_word()
    node.set_child("a", 1)
    node.set_child("z", 0x01020304)
    record = node.pack()

    assert len(record) == NODE_SIZE
    assert record[0:2] == b"B\x00"
    assert record[2] == 1
    assert record[3:7] == b"\x01\x00\x00\x00"
    assert record[-4:] == b"\x04\x03\x02\x01"


def test_unpack_restores_node():
    node = TrieNode(label="k")
    node.set_child("e", 42)
    node.mark_word()

    assert TrieNode.unpack(node.pack()) == node


def test_copy_is_independent():
    node = TrieNode(label="c")
    node.set_child("a", 2)
    clone = node.copy()

    assert clone == node
    clone.set_child("a", 9)
    clone.mark_word()
    assert node.get_child("a") == 2
    assert not node.is_word
