"""Static Huffman byte-stream compressor."""

from huffpack.encoding_schemes import huffman_decode, huffman_encode
from huffpack.errors import (
    CorruptStream,
    EmptyFrequencyTable,
    EmptyStructure,
    HuffmanError,
    InputTooLarge,
    InputUnreadable,
    OutputUnwritable,
)
from huffpack.pipeline import CodecConfig, compress_file, decompress_file

__version__ = "0.1.0"

__all__ = [
    "huffman_encode",
    "huffman_decode",
    "compress_file",
    "decompress_file",
    "CodecConfig",
    "HuffmanError",
    "InputUnreadable",
    "OutputUnwritable",
    "EmptyFrequencyTable",
    "EmptyStructure",
    "CorruptStream",
    "InputTooLarge",
]
