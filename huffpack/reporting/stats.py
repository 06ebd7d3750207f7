import math
from dataclasses import dataclass
from typing import Dict

from huffpack.encoding_schemes.codes import CodeTable
from huffpack.encoding_schemes.container import COUNT_SIZE, ENTRY_SIZE
from huffpack.encoding_schemes.tree import FrequencyTable


@dataclass
class CompressionStats:
    """
    Size and code-length figures for one compressed input.

    - original_bytes: input size
    - compressed_bytes: header + padded payload size
    - payload_bits: payload length before padding
    - distinct_symbols: number of header entries
    - avg_code_length: payload bits per input byte
    - entropy_bits: Shannon entropy of the byte distribution (bits/byte)
    """
    original_bytes: int
    compressed_bytes: int
    payload_bits: int
    distinct_symbols: int
    avg_code_length: float
    entropy_bits: float

    @property
    def ratio(self) -> float:
        if not self.original_bytes:
            return 0.0
        return self.compressed_bytes / self.original_bytes

    def as_dict(self) -> Dict[str, object]:
        return {
            "original_bytes": self.original_bytes,
            "compressed_bytes": self.compressed_bytes,
            "payload_bits": self.payload_bits,
            "distinct_symbols": self.distinct_symbols,
            "avg_code_length": self.avg_code_length,
            "entropy_bits": self.entropy_bits,
            "ratio": self.ratio,
        }

    def summary(self) -> str:
        return (
            f"{self.original_bytes} -> {self.compressed_bytes} bytes "
            f"(ratio {self.ratio:.3f}), {self.distinct_symbols} symbols, "
            f"avg code {self.avg_code_length:.3f} bits, entropy {self.entropy_bits:.3f} bits"
        )


def shannon_entropy(frequencies: FrequencyTable) -> float:
    total = sum(frequencies.values())
    if not total:
        return 0.0
    entropy = 0.0
    for freq in frequencies.values():
        if freq:
            p = freq / total
            entropy -= p * math.log2(p)
    return entropy


def compute_stats(frequencies: FrequencyTable, codes: CodeTable) -> CompressionStats:
    original = sum(frequencies.values())
    if not frequencies:
        return CompressionStats(0, 0, 0, 0, 0.0, 0.0)
    payload_bits = sum(freq * len(codes[symbol]) for symbol, freq in frequencies.items())
    header = COUNT_SIZE + ENTRY_SIZE * len(frequencies)
    return CompressionStats(
        original_bytes=original,
        compressed_bytes=header + (payload_bits + 7) // 8,
        payload_bits=payload_bits,
        distinct_symbols=len(frequencies),
        avg_code_length=payload_bits / original if original else 0.0,
        entropy_bits=shannon_entropy(frequencies),
    )
