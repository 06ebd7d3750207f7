import random
import struct
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffpack.encoding_schemes.huffman import (
    HuffmanEncoded,
    decode_symbols,
    huffman_decode,
    huffman_encode,
    pack,
    unpack,
)
from huffpack.encoding_schemes.tree import build_tree
from huffpack.errors import CorruptStream


@pytest.mark.parametrize(
    "data",
    [
        b"hello huffman!",
        b"a",
        b"ab",
        bytes(range(256)),
        b"\x00\xff" * 300 + b"\x01",
    ],
)
def test_roundtrip_in_memory(data):
    encoded = huffman_encode(data)
    assert huffman_decode(encoded) == data
    assert huffman_decode(unpack(pack(encoded))) == data


def test_roundtrip_random_bytes():
    rng = random.Random(2024)
    data = bytes(rng.getrandbits(8) for _ in range(10 * 1024))
    assert huffman_decode(unpack(pack(huffman_encode(data)))) == data


def test_empty_input_packs_to_nothing():
    encoded = huffman_encode(b"")
    assert encoded.bits == ""
    assert encoded.frequencies == {}
    assert pack(encoded) == b""
    assert huffman_decode(unpack(b"")) == b""


def test_single_symbol_has_no_payload():
    encoded = huffman_encode(b"z" * 1000)
    assert encoded.bits == ""
    assert encoded.frequencies == {ord("z"): 1000}
    assert pack(encoded) == struct.pack("<I", 1) + struct.pack("<BI", ord("z"), 1000)
    assert huffman_decode(encoded) == b"z" * 1000


def test_aaabbc_packed_layout():
    blob = pack(huffman_encode(b"aaabbc"))
    header = (
        struct.pack("<I", 3)
        + struct.pack("<BI", ord("a"), 3)
        + struct.pack("<BI", ord("b"), 2)
        + struct.pack("<BI", ord("c"), 1)
    )
    # a=0 c=10 b=11 -> 000 11 11 10 -> 000111110 + 7 padding bits
    assert blob == header + bytes([0b00011111, 0b00000000])


def test_padding_bits_are_not_decoded():
    # a=0 b=1; the six zero padding bits would decode to "a"s if read
    encoded = unpack(pack(huffman_encode(b"ab")))
    assert encoded.bits == "01000000"
    assert huffman_decode(encoded) == b"ab"


def test_truncated_bits_raise_corrupt_stream():
    encoded = huffman_encode(b"This is a test" * 10)
    encoded.bits = encoded.bits[:-5]
    with pytest.raises(CorruptStream):
        huffman_decode(encoded)


def test_decode_symbols_stops_at_total():
    tree = build_tree({ord("x"): 2, ord("y"): 1})
    # y (1) is extracted first and becomes the left child
    decoded = list(decode_symbols(tree, iter([0, 0, 0, 0, 1, 1]), total=2))
    assert decoded == [ord("y"), ord("y")]
