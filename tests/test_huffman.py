import pytest

from dsakit.huffman import build_huffman_tree, huffman_codes

SYMBOLS = ["_", "i", "n", "o", "g", "m", "e", "y", "t"]
FREQS = [8, 7, 5, 4, 4, 3, 2, 2, 1]
TABLE = dict(zip(SYMBOLS, FREQS))


def test_every_symbol_gets_a_code():
    codes = huffman_codes(TABLE)
    assert set(codes) == set(SYMBOLS)
    assert all(set(code) <= {"0", "1"} and code for code in codes.values())


def test_codes_are_prefix_free():
    codes = sorted(huffman_codes(TABLE).values())
    assert len(set(codes)) == len(SYMBOLS)
    # In sorted order a code that prefixes another also prefixes its successor.
    prefixed = [(a, b) for a, b in zip(codes, codes[1:]) if b.startswith(a)]
    assert prefixed == []


def test_weighted_length_is_optimal_for_source_example():
    codes = huffman_codes(TABLE)
    assert sum(TABLE[s] * len(c) for s, c in codes.items()) == 108


def test_more_frequent_symbols_get_shorter_or_equal_codes():
    codes = huffman_codes(TABLE)
    for a in SYMBOLS:
        for b in SYMBOLS:
            if TABLE[a] > TABLE[b]:
                assert len(codes[a]) <= len(codes[b])


def test_tree_root_holds_total_frequency():
    root = build_huffman_tree(TABLE)
    assert root.freq == sum(FREQS)
    assert root.symbol is None
    assert not root.is_leaf


def test_accepts_pairs():
    assert huffman_codes(list(zip(SYMBOLS, FREQS))).keys() == huffman_codes(TABLE).keys()


def test_single_symbol_has_empty_code():
    assert huffman_codes({"a": 5}) == {"a": ""}


def test_empty_input_raises():
    with pytest.raises(ValueError):
        build_huffman_tree({})