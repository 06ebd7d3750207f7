from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from huffpack.encoding_schemes.container import read_header
from huffpack.encoding_schemes.huffman import decode_symbols
from huffpack.encoding_schemes.tree import build_tree
from huffpack.errors import InputUnreadable
from huffpack.pipeline.config import CodecConfig
from huffpack.utils.bits_bytes_utils import iter_bits
from huffpack.utils.debug import _dbg
from huffpack.utils.file_utils import atomic_output, open_input


def _read_bits(stream: BinaryIO, path: Path, chunk_size: int) -> Iterable[int]:
    try:
        yield from iter_bits(stream, chunk_size)
    except OSError as exc:
        raise InputUnreadable(f"Cannot read input file: {path} ({exc.strerror})") from exc


def decompress_file(
    input_path: Path,
    output_path: Path,
    cfg: Optional[CodecConfig] = None,
) -> int:
    """
    Decompress `input_path` into `output_path`; returns the number of bytes written.

    A file too short to hold the symbol count decodes to an empty output.
    Raises CorruptStream if the payload ends before every symbol is decoded,
    in which case `output_path` is not created.
    """
    if cfg is None:
        cfg = CodecConfig()
    input_path = Path(input_path)
    output_path = Path(output_path)

    with open_input(input_path) as src:
        try:
            frequencies = read_header(src)
        except OSError as exc:
            raise InputUnreadable(f"Cannot read input file: {input_path} ({exc.strerror})") from exc

        if not frequencies:
            print("Input file is empty or corrupt. Creating empty output.")
            with atomic_output(output_path):
                pass
            return 0

        tree = build_tree(frequencies)
        total = tree.total_frequency
        _dbg(f"{input_path}: {len(frequencies)} distinct symbols, {total} to decode")

        written = 0
        buffer = bytearray()
        with atomic_output(output_path) as dst:
            bits = _read_bits(src, input_path, cfg.chunk_size)
            for symbol in decode_symbols(tree, bits, total):
                buffer.append(symbol)
                if len(buffer) >= cfg.chunk_size:
                    dst.write(buffer)
                    written += len(buffer)
                    buffer.clear()
            dst.write(buffer)
            written += len(buffer)

    print("File decompressed successfully.")
    return written
