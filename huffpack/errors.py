"""
Exception hierarchy for huffpack.

Library code raises these; only the command-line entry point turns them
into messages and exit statuses.
"""


class HuffmanError(Exception):
    """Base class for every error raised by huffpack."""


class InputUnreadable(HuffmanError):
    """The source path is missing or cannot be opened for reading."""


class OutputUnwritable(HuffmanError):
    """The destination path cannot be created or written."""


class EmptyFrequencyTable(HuffmanError, ValueError):
    """A Huffman tree was requested for a table with no symbols."""


class EmptyStructure(HuffmanError, IndexError):
    """A minimum was requested from an empty priority selector."""


class CorruptStream(HuffmanError, ValueError):
    """A compressed stream is malformed or ends before all symbols are decoded."""


class InputTooLarge(HuffmanError, ValueError):
    """A symbol occurs more often than the 32-bit frequency field can record."""
