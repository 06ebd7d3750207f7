from dataclasses import dataclass


@dataclass
class CodecConfig:
    """
    Configuration for compress/decompress runs.
    """
    chunk_size: int = 65536
    verbose: bool = False
    # Batch runner naming
    output_suffix: str = ".huf"
    decoded_suffix: str = "_decoded"

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
