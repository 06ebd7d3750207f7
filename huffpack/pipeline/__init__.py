from huffpack.pipeline.config import CodecConfig
from huffpack.pipeline.runner import run_mode
from huffpack.pipeline.compress import compress_file
from huffpack.pipeline.decompress import decompress_file


def run_batch_on_folder(*args, **kwargs):
    # Lazy import: huffpack.utils.batch imports back into this package
    from huffpack.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "CodecConfig",
    "run_mode",
    "compress_file",
    "decompress_file",
    "run_batch_on_folder",
]
