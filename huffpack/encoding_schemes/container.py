"""
Header layout of a compressed file.

    [u32 distinct symbol count]
    count x [u8 symbol][u32 frequency]
    [payload bits, MSB first, zero padded to a byte boundary]

Integers are little-endian. An empty input compresses to zero bytes with
no header at all.
"""

import struct
from typing import BinaryIO, Optional

from huffpack.encoding_schemes.tree import FrequencyTable
from huffpack.errors import CorruptStream, InputTooLarge

COUNT_FMT = "<I"
ENTRY_FMT = "<BI"
COUNT_SIZE = struct.calcsize(COUNT_FMT)
ENTRY_SIZE = struct.calcsize(ENTRY_FMT)
MAX_SYMBOLS = 256
MAX_FREQUENCY = 2**32 - 1


def pack_header(frequencies: FrequencyTable) -> bytes:
    """Serialize a frequency table, entries in ascending symbol order."""
    parts = [struct.pack(COUNT_FMT, len(frequencies))]
    for symbol in sorted(frequencies):
        freq = frequencies[symbol]
        if freq > MAX_FREQUENCY:
            raise InputTooLarge(
                f"Frequency {freq} of symbol {symbol} does not fit in 32 bits"
            )
        parts.append(struct.pack(ENTRY_FMT, symbol, freq))
    return b"".join(parts)


def read_header(stream: BinaryIO) -> Optional[FrequencyTable]:
    """
    Read a frequency table from the start of `stream`.

    Returns None when the count field cannot be read (empty or truncated
    file), which callers treat as an empty input. Leaves the stream
    positioned at the first payload byte.
    """
    raw = stream.read(COUNT_SIZE)
    if len(raw) < COUNT_SIZE:
        return None
    (count,) = struct.unpack(COUNT_FMT, raw)
    if count > MAX_SYMBOLS:
        raise CorruptStream(f"Header declares {count} distinct symbols (max {MAX_SYMBOLS})")

    table = stream.read(count * ENTRY_SIZE)
    if len(table) < count * ENTRY_SIZE:
        raise CorruptStream(
            f"Frequency table truncated: expected {count} entries, "
            f"got {len(table) // ENTRY_SIZE}"
        )

    frequencies: FrequencyTable = {}
    for symbol, freq in struct.iter_unpack(ENTRY_FMT, table):
        if symbol in frequencies:
            raise CorruptStream(f"Symbol {symbol} appears twice in the frequency table")
        frequencies[symbol] = freq
    return frequencies
