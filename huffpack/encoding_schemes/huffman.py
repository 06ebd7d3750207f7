from dataclasses import dataclass, field
from io import BytesIO
from typing import Iterable, Iterator

from huffpack.encoding_schemes.codes import generate_codes
from huffpack.encoding_schemes.container import pack_header, read_header
from huffpack.encoding_schemes.tree import (
    FrequencyTable,
    HuffmanTree,
    Leaf,
    build_tree,
    count_frequencies,
)
from huffpack.errors import CorruptStream
from huffpack.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    bytes_to_bitstring,
    pad_bitstring,
)


@dataclass
class HuffmanEncoded:
    """
    Container for Huffman-encoded data.

    - bits: encoded bit string (e.g. '010101...'), without padding
    - frequencies: symbol -> count table the decoder rebuilds the tree from
    """
    bits: str
    frequencies: FrequencyTable = field(default_factory=dict)

    @property
    def total_symbols(self) -> int:
        return sum(self.frequencies.values())


def decode_symbols(tree: HuffmanTree, bits: Iterable[int], total: int) -> Iterator[int]:
    """
    Walk `tree` with `bits` and yield exactly `total` symbols.

    Bits left over after the last symbol are never read. Raises
    CorruptStream if the bits run out first.
    """
    if total <= 0:
        return
    root = tree.node(tree.root)
    if tree.is_single_leaf():
        for _ in range(total):
            yield root.symbol
        return

    decoded = 0
    current = root
    for bit in bits:
        current = tree.node(current.right if bit else current.left)
        if isinstance(current, Leaf):
            yield current.symbol
            decoded += 1
            if decoded == total:
                return
            current = root

    raise CorruptStream(
        f"Bit stream ended after {decoded} of {total} symbols"
    )


def huffman_encode(data: bytes) -> HuffmanEncoded:
    """
    Encode raw bytes with Huffman coding.
    """
    if not data:
        return HuffmanEncoded(bits="", frequencies={})
    frequencies = count_frequencies(data)
    codes = generate_codes(build_tree(frequencies))
    bits = "".join(codes[byte] for byte in data)
    return HuffmanEncoded(bits=bits, frequencies=frequencies)


def huffman_decode(encoded: HuffmanEncoded) -> bytes:
    """
    Decode HuffmanEncoded back to the original bytes.
    """
    if not encoded.frequencies:
        return b""
    tree = build_tree(encoded.frequencies)
    bits = (1 if ch == "1" else 0 for ch in encoded.bits)
    return bytes(decode_symbols(tree, bits, encoded.total_symbols))


def pack(encoded: HuffmanEncoded) -> bytes:
    """Serialize to the on-disk format (header + padded payload)."""
    if not encoded.frequencies:
        return b""
    payload = bitstring_to_bytes(pad_bitstring(encoded.bits))
    return pack_header(encoded.frequencies) + payload


def unpack(blob: bytes) -> HuffmanEncoded:
    """Parse the on-disk format. Padding bits stay on the end of `bits`."""
    stream = BytesIO(blob)
    frequencies = read_header(stream)
    if not frequencies:
        return HuffmanEncoded(bits="", frequencies={})
    return HuffmanEncoded(bits=bytes_to_bitstring(stream.read()), frequencies=frequencies)
