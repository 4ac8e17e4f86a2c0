"""Hint panel generation."""

from .layout import hint_display_options, render_cell, render_hints
from .options import HintLayoutConfig, HintOptions
from .ordering import hint_sort_key, sort_heads
from .strategy import (
    AutoHints,
    CustomHints,
    DisabledHints,
    FixedHints,
    HintOptionError,
    HintStrategy,
    resolve_strategy,
)
from .width import display_width, longest_prefix_within

__all__ = [
    "AutoHints",
    "CustomHints",
    "DisabledHints",
    "FixedHints",
    "HintLayoutConfig",
    "HintOptionError",
    "HintOptions",
    "HintStrategy",
    "display_width",
    "hint_display_options",
    "hint_sort_key",
    "longest_prefix_within",
    "render_cell",
    "render_hints",
    "resolve_strategy",
    "sort_heads",
]
