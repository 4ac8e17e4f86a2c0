"""Terminal display-width measurement and width-bounded prefixes.

Text is measured and cut per grapheme cluster, so emoji sequences joined
with ZWJ or carrying a variation selector count as one glyph.
"""

from __future__ import annotations

from functools import lru_cache

import grapheme
import wcwidth as _wcwidth

_VS16 = 0xFE0F
_ZWJ = 0x200D


def _is_printable_ascii(text: str) -> bool:
    return all(0x20 <= ord(ch) <= 0x7E for ch in text)


def _is_emoji_sequence(cluster: str) -> bool:
    for ch in cluster:
        cp = ord(ch)
        if cp in (_VS16, _ZWJ):
            return True
        # skin tone modifiers and regional indicator pairs
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return True
    return False


def cluster_width(cluster: str) -> int:
    """Columns taken by a single grapheme cluster."""

    if len(cluster) > 1 and _is_emoji_sequence(cluster):
        return 2
    # control and unassigned codepoints report -1; combining marks report 0
    return sum(max(_wcwidth.wcwidth(ch), 0) for ch in cluster)


@lru_cache(maxsize=2048)
def _wide_width(text: str) -> int:
    return sum(cluster_width(cluster) for cluster in grapheme.graphemes(text))


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies."""

    if not text:
        return 0
    if _is_printable_ascii(text):
        return len(text)
    return _wide_width(text)


def grapheme_length(text: str) -> int:
    if _is_printable_ascii(text):
        return len(text)
    return grapheme.length(text)


def grapheme_prefix(text: str, count: int) -> str:
    """First ``count`` grapheme clusters of ``text``."""

    if count <= 0:
        return ""
    if _is_printable_ascii(text):
        return text[:count]
    return grapheme.slice(text, 0, count)


def longest_prefix_within(text: str, max_width: int) -> str:
    """Longest grapheme prefix of ``text`` whose display width fits ``max_width``.

    Binary search over cluster boundaries; display width is monotonic in
    the prefix length, so the largest fitting cut is found in O(log n)
    measurements and never splits a glyph.
    """

    lo, hi = 0, grapheme_length(text)
    best = ""
    while lo <= hi:
        mid = (lo + hi) // 2
        part = grapheme_prefix(text, mid)
        if display_width(part) <= max_width:
            best = part
            lo = mid + 1
        else:
            hi = mid - 1
    return best


__all__ = [
    "cluster_width",
    "display_width",
    "grapheme_length",
    "grapheme_prefix",
    "longest_prefix_within",
]
