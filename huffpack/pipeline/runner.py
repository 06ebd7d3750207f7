from pathlib import Path
from typing import Optional

from huffpack.pipeline.config import CodecConfig


def run_mode(mode: str, input_path: Path, output_path: Path, cfg: Optional[CodecConfig] = None):
    """
    Dispatch a file operation based on `mode`.
    Returns CompressionStats for "compress" and the decoded byte count for "decompress".
    """
    if cfg is None:
        cfg = CodecConfig()
    if mode == "compress":
        from huffpack.pipeline.compress import compress_file

        return compress_file(input_path, output_path, cfg)
    if mode == "decompress":
        from huffpack.pipeline.decompress import decompress_file

        return decompress_file(input_path, output_path, cfg)
    raise ValueError(f"Unsupported mode: {mode}")
