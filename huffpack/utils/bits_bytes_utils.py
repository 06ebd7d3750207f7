from typing import BinaryIO, Iterator


def bytes_to_bitstring(data: bytes) -> str:
    """Convert bytes -> bitstring (8 bits per byte, MSB first)."""
    return "".join(f"{byte:08b}" for byte in data)


def bitstring_to_bytes(bits: str) -> bytes:
    """
    Convert bitstring -> bytes.

    Length must be a multiple of 8.
    """
    if len(bits) % 8 != 0:
        raise ValueError(
            f"Bitstring length must be multiple of 8, got {len(bits)}"
        )
    if not bits:
        return b""
    return int(bits, 2).to_bytes(len(bits) // 8, "big")


def pad_bitstring(bits: str) -> str:
    """Append zero bits until the length is a multiple of 8."""
    remainder = len(bits) % 8
    if remainder:
        bits += "0" * (8 - remainder)
    return bits


def split_whole_bytes(bits: str):
    """
    Split a bitstring into (whole_bytes_part, leftover_bits).

    The leftover holds fewer than 8 bits and is carried into the next chunk.
    """
    cut = len(bits) - (len(bits) % 8)
    return bits[:cut], bits[cut:]


def iter_bits(stream: BinaryIO, chunk_size: int = 65536) -> Iterator[int]:
    """
    Lazily yield the bits of a binary stream, most significant bit first.

    The generator reads `chunk_size` bytes at a time and stops at end of stream.
    """
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        for byte in chunk:
            for shift in range(7, -1, -1):
                yield (byte >> shift) & 1
