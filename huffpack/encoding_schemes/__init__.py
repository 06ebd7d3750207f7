from huffpack.encoding_schemes.priority import PrioritySelector
from huffpack.encoding_schemes.tree import (
    FrequencyTable,
    HuffmanTree,
    Internal,
    Leaf,
    build_tree,
    count_frequencies,
)
from huffpack.encoding_schemes.codes import CodeTable, generate_codes, is_prefix_free
from huffpack.encoding_schemes.huffman import (
    HuffmanEncoded,
    decode_symbols,
    huffman_decode,
    huffman_encode,
    pack,
    unpack,
)

__all__ = [
    "PrioritySelector",
    "FrequencyTable",
    "HuffmanTree",
    "Internal",
    "Leaf",
    "build_tree",
    "count_frequencies",
    "CodeTable",
    "generate_codes",
    "is_prefix_free",
    "HuffmanEncoded",
    "decode_symbols",
    "huffman_decode",
    "huffman_encode",
    "pack",
    "unpack",
]
