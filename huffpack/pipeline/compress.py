from collections import Counter
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional

from huffpack.encoding_schemes.codes import CodeTable, generate_codes
from huffpack.encoding_schemes.container import pack_header
from huffpack.encoding_schemes.tree import FrequencyTable, build_tree
from huffpack.errors import CorruptStream, InputUnreadable
from huffpack.pipeline.config import CodecConfig
from huffpack.reporting.stats import CompressionStats, compute_stats
from huffpack.utils.bits_bytes_utils import bitstring_to_bytes, pad_bitstring, split_whole_bytes
from huffpack.utils.debug import _dbg
from huffpack.utils.file_utils import atomic_output, open_input


def _read_chunk(stream: BinaryIO, size: int, path: Path) -> bytes:
    try:
        return stream.read(size)
    except OSError as exc:
        raise InputUnreadable(f"Cannot read input file: {path} ({exc.strerror})") from exc


def _count_stream(stream: BinaryIO, path: Path, chunk_size: int) -> FrequencyTable:
    counts: Counter = Counter()
    while True:
        chunk = _read_chunk(stream, chunk_size, path)
        if not chunk:
            break
        counts.update(chunk)
    return dict(counts)


def _write_payload(
    src: BinaryIO,
    dst: BinaryIO,
    codes: CodeTable,
    path: Path,
    chunk_size: int,
) -> int:
    """Pack the codes of every input byte MSB-first; returns payload bits written."""
    carry = ""
    total_bits = 0
    while True:
        chunk = _read_chunk(src, chunk_size, path)
        if not chunk:
            break
        try:
            bits = carry + "".join(codes[byte] for byte in chunk)
        except KeyError as exc:
            raise CorruptStream(f"Input file changed while compressing: {path}") from exc
        total_bits += len(bits) - len(carry)
        whole, carry = split_whole_bytes(bits)
        if whole:
            dst.write(bitstring_to_bytes(whole))
    if carry:
        dst.write(bitstring_to_bytes(pad_bitstring(carry)))
    return total_bits


def _buffer_stream(stream: BinaryIO, path: Path, chunk_size: int) -> BytesIO:
    """Read a stream that cannot be rewound into memory so it can be read twice."""
    buffer = BytesIO()
    while True:
        chunk = _read_chunk(stream, chunk_size, path)
        if not chunk:
            break
        buffer.write(chunk)
    buffer.seek(0)
    return buffer


def write_compressed(
    src: BinaryIO,
    output_path: Path,
    frequencies: FrequencyTable,
    cfg: CodecConfig,
    input_path: Path = Path("<stream>"),
) -> CompressionStats:
    """
    Write header and payload for `src`, whose byte counts are `frequencies`.

    `src` must be positioned at the first input byte. The header is packed
    before the destination is opened, so a table that cannot be stored
    leaves no output behind.
    """
    codes = generate_codes(build_tree(frequencies))
    header = pack_header(frequencies)

    with atomic_output(output_path) as dst:
        dst.write(header)
        payload_bits = _write_payload(src, dst, codes, input_path, cfg.chunk_size)

    _dbg(f"{output_path}: header {len(header)} bytes, payload {payload_bits} bits")
    return compute_stats(frequencies, codes)


def compress_file(
    input_path: Path,
    output_path: Path,
    cfg: Optional[CodecConfig] = None,
) -> CompressionStats:
    """
    Compress `input_path` into `output_path`.

    An empty input produces an empty output file. Any existing destination
    is replaced only once the whole output has been written. Inputs that
    cannot be rewound (pipes, FIFOs) are buffered in memory.
    """
    if cfg is None:
        cfg = CodecConfig()
    input_path = Path(input_path)
    output_path = Path(output_path)

    with open_input(input_path) as raw:
        src = raw
        if not raw.seekable():
            _dbg(f"{input_path}: not seekable, buffering in memory")
            src = _buffer_stream(raw, input_path, cfg.chunk_size)

        frequencies = _count_stream(src, input_path, cfg.chunk_size)
        _dbg(f"{input_path}: {len(frequencies)} distinct symbols")

        if not frequencies:
            print("Input file is empty. Nothing to compress.")
            with atomic_output(output_path):
                pass
            return compute_stats({}, {})

        try:
            src.seek(0)
        except OSError as exc:
            raise InputUnreadable(f"Cannot rewind input file: {input_path} ({exc})") from exc
        stats = write_compressed(src, output_path, frequencies, cfg, input_path)

    print("File compressed successfully.")
    return stats
