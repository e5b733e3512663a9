import sys

from toonkit.folding import (
    FoldableChain,
    _single_key_entry,
    analyze_foldable_chain,
    should_fold,
)
from toonkit.options import KeyFoldingMode

UNLIMITED = sys.maxsize


def test_is_single_key_object():
    assert _single_key_entry({"a": 1}) == ("a", 1)
    assert _single_key_entry({"a": 1, "b": 2}) is None
    assert _single_key_entry(42) is None


def test_analyze_simple_chain():
    chain = analyze_foldable_chain("a", {"b": {"c": 1}}, UNLIMITED, [])
    assert chain is not None
    assert chain.folded_key == "a.b.c"
    assert chain.depth_folded == 3
    assert chain.leaf_value == 1


def test_analyze_with_flatten_depth():
    chain = analyze_foldable_chain("a", {"b": {"c": {"d": 1}}}, 2, [])
    assert chain is not None
    assert chain.folded_key == "a.b"
    assert chain.depth_folded == 2
    assert chain.leaf_value == {"c": {"d": 1}}


def test_analyze_stops_at_multi_key():
    chain = analyze_foldable_chain("a", {"b": {"c": 1, "d": 2}}, UNLIMITED, [])
    assert chain is not None
    assert chain.folded_key == "a.b"
    assert chain.depth_folded == 2
    assert chain.leaf_value == {"c": 1, "d": 2}


def test_analyze_rejects_non_identifier():
    assert analyze_foldable_chain("bad-key", {"c": 1}, UNLIMITED, []) is None


def test_analyze_stops_at_non_identifier_segment():
    chain = analyze_foldable_chain("a", {"b": {"bad-key": 1}}, UNLIMITED, [])
    assert chain is not None
    assert chain.folded_key == "a.b"
    assert chain.leaf_value == {"bad-key": 1}


def test_analyze_detects_collision():
    assert analyze_foldable_chain("a", {"b": 1}, UNLIMITED, ["a.b"]) is None


def test_analyze_too_short_chain():
    assert analyze_foldable_chain("a", 42, UNLIMITED, []) is None


def test_should_fold():
    chain = FoldableChain(folded_key="a.b", leaf_value=1, depth_folded=2)
    assert should_fold(KeyFoldingMode.SAFE, chain) is True
    assert should_fold(KeyFoldingMode.OFF, chain) is False
    assert should_fold(KeyFoldingMode.SAFE, None) is False