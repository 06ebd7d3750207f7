import argparse
import sys
from pathlib import Path
from typing import List, Optional

from huffpack.errors import HuffmanError
from huffpack.pipeline.config import CodecConfig
from huffpack.pipeline.runner import run_mode

USAGE = """\
huffpack -c <input_file> <output_file>
       huffpack -d <input_file> <output_file>"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffpack",
        usage=USAGE,
        description="Compress or decompress a file with static Huffman coding.",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-c", "--compress",
        dest="mode", action="store_const", const="compress",
        help="Compress <input_file> into <output_file>.",
    )
    mode.add_argument(
        "-d", "--decompress",
        dest="mode", action="store_const", const="decompress",
        help="Decompress <input_file> into <output_file>.",
    )
    parser.add_argument("input_file", help="Path to read.")
    parser.add_argument("output_file", help="Path to write (overwritten if it exists).")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print compression statistics after compressing.",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=CodecConfig.chunk_size,
        help="Read/write chunk size in bytes (default: %(default)s).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.chunk_size <= 0:
        parser.error("--chunk-size must be positive")

    cfg = CodecConfig(chunk_size=args.chunk_size, verbose=args.verbose)
    try:
        result = run_mode(args.mode, Path(args.input_file), Path(args.output_file), cfg)
    except HuffmanError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if cfg.verbose and args.mode == "compress":
        print(result.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
