"""Analysis of single-key object chains that can be written as dotted keys."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Any

from toonkit.options import KeyFoldingMode
from toonkit.text import is_identifier_segment


@dataclass(frozen=True)
class FoldableChain:
    """A chain of keys folded into one dotted key, with the value at its end."""

    folded_key: str
    leaf_value: Any
    depth_folded: int


def _single_key_entry(value: Any) -> tuple[str, Any] | None:
    """Return the only (key, value) pair of a one-key object, else None."""
    if isinstance(value, dict) and len(value) == 1:
        return next(iter(value.items()))
    return None


def analyze_foldable_chain(
    key: str,
    value: Any,
    flatten_depth: int,
    existing_keys: Collection[str],
) -> FoldableChain | None:
    """Work out whether key and value fold into a dotted key, and into which."""
    if not is_identifier_segment(key):
        return None

    segments = [key]
    current = value
    while (entry := _single_key_entry(current)) is not None:
        if len(segments) >= flatten_depth:
            break
        next_key, next_value = entry
        if not is_identifier_segment(next_key):
            break
        segments.append(next_key)
        current = next_value

    if len(segments) < 2:
        return None

    folded_key = ".".join(segments)
    if folded_key in existing_keys:
        return None

    return FoldableChain(folded_key=folded_key, leaf_value=current, depth_folded=len(segments))


def should_fold(mode: KeyFoldingMode, chain: FoldableChain | None) -> bool:
    """True when folding is enabled and a chain was found."""
    return mode is KeyFoldingMode.SAFE and chain is not None