import sys
from io import BytesIO
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffpack.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    bytes_to_bitstring,
    iter_bits,
    pad_bitstring,
    split_whole_bytes,
)


def test_bytes_to_bitstring_is_msb_first():
    assert bytes_to_bitstring(b"\x80\x01") == "1000000000000001"


def test_bitstring_to_bytes():
    assert bitstring_to_bytes("0000000111111111") == b"\x01\xff"
    assert bitstring_to_bytes("") == b""
    with pytest.raises(ValueError):
        bitstring_to_bytes("101")


def test_pad_bitstring():
    assert pad_bitstring("1") == "10000000"
    assert pad_bitstring("10101010") == "10101010"
    assert pad_bitstring("") == ""


def test_split_whole_bytes():
    assert split_whole_bytes("1" * 19) == ("1" * 16, "111")
    assert split_whole_bytes("0101") == ("", "0101")


def test_iter_bits_reads_across_chunks():
    stream = BytesIO(b"\xa0\x0f\x81")
    bits = list(iter_bits(stream, chunk_size=2))
    assert bits == [1, 0, 1, 0, 0, 0, 0, 0,
                    0, 0, 0, 0, 1, 1, 1, 1,
                    1, 0, 0, 0, 0, 0, 0, 1]


def test_iter_bits_is_lazy():
    stream = BytesIO(b"\xff" * 4)
    bits = iter_bits(stream, chunk_size=1)
    assert next(bits) == 1
    assert stream.tell() == 1
