import random
import sys
from collections import Counter
from pathlib import Path

import dahuffman
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffpack.encoding_schemes.codes import generate_codes, is_prefix_free
from huffpack.encoding_schemes.tree import Internal, Leaf, build_tree, count_frequencies
from huffpack.errors import EmptyFrequencyTable


def test_count_frequencies():
    assert count_frequencies(b"aaabbc") == {ord("a"): 3, ord("b"): 2, ord("c"): 1}
    assert count_frequencies(b"") == {}


def test_build_tree_rejects_empty_table():
    with pytest.raises(EmptyFrequencyTable):
        build_tree({})


def test_single_symbol_tree_is_a_leaf_with_empty_code():
    tree = build_tree({65: 10})
    assert tree.is_single_leaf()
    assert tree.node(tree.root) == Leaf(65, 10)
    assert generate_codes(tree) == {65: ""}


def test_internal_frequency_is_sum_of_children():
    tree = build_tree({1: 5, 2: 7, 3: 2, 4: 3})
    for node in tree.nodes:
        if isinstance(node, Internal):
            left = tree.node(node.left)
            right = tree.node(node.right)
            assert node.frequency == left.frequency + right.frequency
    assert tree.total_frequency == 17


def test_aaabbc_codes():
    tree = build_tree(count_frequencies(b"aaabbc"))
    codes = generate_codes(tree)
    a, b, c = codes[ord("a")], codes[ord("b")], codes[ord("c")]

    assert len(a) <= len(b) <= len(c)
    # c (1) and b (2) merge first, then a (3) comes out before the merged node (3)
    assert codes == {ord("a"): "0", ord("c"): "10", ord("b"): "11"}


def test_codes_cover_every_symbol_and_are_prefix_free():
    rng = random.Random(1234)
    for _ in range(20):
        alphabet = rng.sample(range(256), rng.randint(2, 256))
        freqs = {sym: rng.randint(1, 1000) for sym in alphabet}
        codes = generate_codes(build_tree(freqs))

        assert set(codes) == set(freqs)
        assert all(codes.values())
        assert is_prefix_free(codes)


def test_is_prefix_free_detects_prefix():
    assert not is_prefix_free({1: "0", 2: "01", 3: "11"})
    assert is_prefix_free({1: "0", 2: "10", 3: "11"})


def test_tree_shape_does_not_depend_on_table_order():
    freqs = {10: 4, 20: 4, 30: 4, 40: 1, 50: 1}
    reordered = dict(reversed(list(freqs.items())))
    assert generate_codes(build_tree(freqs)) == generate_codes(build_tree(reordered))


def test_weighted_length_matches_reference_huffman():
    rng = random.Random(99)
    data = bytes(rng.choice(b"etaoin shrdlu\n") for _ in range(5000)) + bytes(range(40))
    freqs = Counter(data)
    codes = generate_codes(build_tree(dict(freqs)))
    ours = sum(freq * len(codes[sym]) for sym, freq in freqs.items())

    # Passing an existing symbol as eof keeps dahuffman from adding its own EOF leaf
    reference = dahuffman.HuffmanCodec.from_frequencies(dict(freqs), eof=data[0])
    table = reference.get_code_table()
    theirs = sum(freq * table[sym][0] for sym, freq in freqs.items())

    assert ours == theirs
