"""Utility helpers shared across pipeline components."""

from huffpack.utils.file_utils import (
    add_suffix_to_top_level,
    suffix_filename,
    open_input,
    atomic_output,
)
from huffpack.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    bytes_to_bitstring,
    pad_bitstring,
    iter_bits,
)

__all__ = [
    "add_suffix_to_top_level",
    "suffix_filename",
    "open_input",
    "atomic_output",
    "bitstring_to_bytes",
    "bytes_to_bitstring",
    "pad_bitstring",
    "iter_bits",
]
