"""Ordering used when laying heads out in the hint panel.

Short keys come first, plain letters/digits before symbols and special keys,
then case-insensitive alphabetical order with ``a`` ahead of ``A``.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from multicursor_overlay.keymaps import Head

from .width import display_width

SortKey = Tuple[int, bool, str, Tuple[bool, ...], bytes]


def is_plain_key(key: str) -> bool:
    """True for non-empty keys made only of ASCII letters and digits."""

    return bool(key) and key.isascii() and key.isalnum()


def hint_sort_key(key: str) -> SortKey:
    # Among keys equal ignoring case, the case flags differ first at the
    # first case-only difference, where the lowercase variant has False.
    return (
        display_width(key),
        not is_plain_key(key),
        key.lower(),
        tuple(ch.isupper() for ch in key),
        key.encode("utf-8"),
    )


def sort_heads(heads: Iterable[Head]) -> list[Head]:
    return sorted(heads, key=lambda head: hint_sort_key(head.key))


__all__ = ["SortKey", "hint_sort_key", "is_plain_key", "sort_heads"]
