from itertools import combinations
from typing import Dict

from huffpack.encoding_schemes.tree import HuffmanTree, Leaf

CodeTable = Dict[int, str]


def generate_codes(tree: HuffmanTree) -> CodeTable:
    """
    Build the symbol -> code mapping by walking the tree.

    Left edges append '0', right edges '1'. A tree made of a single leaf
    maps its symbol to the empty code.
    """
    codes: CodeTable = {}

    def walk(index: int, current: str) -> None:
        node = tree.node(index)
        if isinstance(node, Leaf):
            codes[node.symbol] = current
            return
        walk(node.left, current + "0")
        walk(node.right, current + "1")

    walk(tree.root, "")
    return codes


def is_prefix_free(codes: CodeTable) -> bool:
    """Return True if no code in the table is a prefix of another."""
    for a, b in combinations(codes.values(), 2):
        if a.startswith(b) or b.startswith(a):
            return False
    return True
