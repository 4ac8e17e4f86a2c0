"""Hint panel layout: fixed-width cells packed column-major into a grid."""

from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Optional, Sequence

from multicursor_overlay.keymaps import Head
from multicursor_overlay.runtime.merge import deep_extend_keep
from multicursor_overlay.runtime.telemetry import span

from .options import HintLayoutConfig, HintOptions
from .ordering import sort_heads
from .strategy import CustomHints, DisabledHints, FixedHints
from .width import display_width, longest_prefix_within

PRODUCT_LABEL = "MultiCursor"
ELLIPSIS = "... "
MARKER = "^"
COLUMN_GAP = 1


def render_cell(head: Head, width: int, separator: str) -> str:
    """Render one head as ``_key_ <sep> desc^`` padded to ``width`` columns.

    Underscores around the key are highlight markup and do not count towards
    the width; the trailing marker does.
    """

    desc = head.desc
    if not desc:
        return ""

    key = head.key
    left_visible = f"{key} {separator} "
    left_markup = f"_{key}_ {separator} "
    left_width = display_width(left_visible)

    available = max(0, width - display_width(MARKER) - left_width)
    truncated = display_width(desc) > available
    target = max(0, available - display_width(ELLIPSIS)) if truncated else available

    body = longest_prefix_within(desc, target)
    if truncated:
        body += ELLIPSIS

    visible = left_width + display_width(body) + display_width(MARKER)
    padding = " " * max(0, width - visible)
    return f"{left_markup}{body}{MARKER}{padding}"


def column_count(layout: HintLayoutConfig, terminal_width: int) -> int:
    if layout.column_count is not None:
        return layout.column_count
    usable = terminal_width - 2 * layout.horizontal_padding
    return max(1, (usable + COLUMN_GAP) // (layout.max_hint_length + COLUMN_GAP))


def layout_grid(
    heads: Sequence[Head], layout: HintLayoutConfig, columns: int
) -> list[str]:
    """Arrange already-sorted heads column-major and return the non-empty rows."""

    rows = max(1, math.ceil(len(heads) / columns))
    lines: list[str] = []
    for row in range(rows):
        cells: list[str] = []
        for column in range(columns):
            index = column * rows + row
            if index >= len(heads):
                break
            cell = render_cell(
                heads[index], layout.max_hint_length, layout.hint_separator
            )
            if cell:
                cells.append(cell)
        if cells:
            lines.append((" " * COLUMN_GAP).join(cells))
    return lines


def apply_padding(lines: Sequence[str], layout: HintLayoutConfig) -> str:
    if not lines:
        return ""
    side = " " * layout.horizontal_padding
    text = "\n".join(f"{side}{line}{side}" for line in lines)
    vertical = layout.vertical_padding
    if vertical > 0:
        text = "\n" * vertical + text + "\n" * (vertical + 1)
    return text


def render_hints(
    options: HintOptions,
    heads: Sequence[Head],
    mode_name: str,
    *,
    terminal_width: int,
) -> str:
    """Produce the hint text for ``mode_name`` according to its strategy."""

    strategy = options.for_mode(mode_name)
    if isinstance(strategy, DisabledHints):
        return f"{PRODUCT_LABEL} {mode_name} mode"
    if isinstance(strategy, FixedHints):
        return strategy.text
    if isinstance(strategy, CustomHints):
        return strategy.render(heads)

    layout = options.config
    with span(
        "hints::render",
        logger_name="multicursor_overlay.hints",
        metadata={"mode": mode_name, "heads": len(heads)},
    ) as handle:
        ordered = sort_heads(heads)
        columns = column_count(layout, terminal_width)
        handle.add_metadata("columns", columns)
        handle.add_metadata("rows", max(1, math.ceil(len(ordered) / columns)))
        return apply_padding(layout_grid(ordered, layout, columns), layout)


def hint_display_options(
    user_options: Optional[Mapping[str, Any]], mode_title: str
) -> Dict[str, Any]:
    """Options for the floating hint window, user values taking precedence."""

    defaults = {
        "float_opts": {
            "title": f" MC {mode_title} ",
            "title_pos": "center",
        },
    }
    return deep_extend_keep(user_options, defaults)


__all__ = [
    "COLUMN_GAP",
    "ELLIPSIS",
    "MARKER",
    "PRODUCT_LABEL",
    "apply_padding",
    "column_count",
    "hint_display_options",
    "layout_grid",
    "render_cell",
    "render_hints",
]
