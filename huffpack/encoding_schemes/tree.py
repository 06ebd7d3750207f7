from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Union

from huffpack.encoding_schemes.priority import PrioritySelector
from huffpack.errors import EmptyFrequencyTable

FrequencyTable = Dict[int, int]


@dataclass(frozen=True)
class Leaf:
    symbol: int
    frequency: int


@dataclass(frozen=True)
class Internal:
    frequency: int
    left: int
    right: int


Node = Union[Leaf, Internal]


@dataclass
class HuffmanTree:
    """
    Arena of tree nodes addressed by index.

    `root` is the index of the root node. Internal nodes refer to their
    children by index, so dropping the tree releases every node at once.
    """
    nodes: List[Node] = field(default_factory=list)
    root: int = -1

    def add(self, node: Node) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def node(self, index: int) -> Node:
        return self.nodes[index]

    def is_single_leaf(self) -> bool:
        return isinstance(self.nodes[self.root], Leaf)

    @property
    def total_frequency(self) -> int:
        return self.nodes[self.root].frequency


def count_frequencies(data: bytes) -> FrequencyTable:
    """Count occurrences of each byte value in `data`."""
    return dict(Counter(data))


def build_tree(frequencies: FrequencyTable) -> HuffmanTree:
    """
    Build the Huffman tree for a non-empty frequency table.

    Leaves are seeded in ascending symbol order and the first of the two
    extracted minima becomes the left child, so the shape depends only on
    the (symbol, frequency) pairs.
    """
    if not frequencies:
        raise EmptyFrequencyTable("cannot build a Huffman tree from an empty frequency table")

    tree = HuffmanTree()
    selector = PrioritySelector()
    for symbol in sorted(frequencies):
        freq = frequencies[symbol]
        selector.insert(tree.add(Leaf(symbol, freq)), freq)

    while selector.size() > 1:
        left_freq, left = selector.extract_min()
        right_freq, right = selector.extract_min()
        merged = left_freq + right_freq
        selector.insert(tree.add(Internal(merged, left, right)), merged)

    _, tree.root = selector.extract_min()
    return tree
