from __future__ import annotations

from typing import Sequence

import pytest

from multicursor_overlay.errors import ConfigError
from multicursor_overlay.hints import (
    CustomHints,
    DisabledHints,
    FixedHints,
    HintLayoutConfig,
    HintOptionError,
    HintOptions,
    display_width,
    hint_display_options,
    render_cell,
    render_hints,
    resolve_strategy,
)
from multicursor_overlay.hints.layout import column_count, layout_grid
from multicursor_overlay.keymaps import (
    Action,
    ActionOptions,
    Head,
    HeadOptions,
    normalize_heads,
)

HEART = "\u2764\ufe0f"
FAMILY = "\U0001f468\u200d\U0001f469\u200d\U0001f467"


def make_head(key: str, desc: str | None) -> Head:
    return Head(key, None, HeadOptions(desc=desc))


def visible(cell: str, key: str) -> str:
    # drop the highlight underscores around the key
    return cell.replace(f"_{key}_", key, 1)


def make_options(**layout: object) -> HintOptions:
    layout_config = HintLayoutConfig(**layout)  # type: ignore[arg-type]
    return HintOptions.resolve(config=layout_config)


def test_cell_without_desc_is_empty() -> None:
    assert render_cell(make_head("a", None), 20, "→") == ""
    assert render_cell(make_head("a", ""), 20, "→") == ""


def test_cell_fits_description_unchanged() -> None:
    cell = render_cell(make_head("a", "select next"), 20, "→")

    assert cell == "_a_ → select next^    "
    assert "..." not in cell
    assert display_width(visible(cell, "a")) == 20


def test_cell_truncates_with_ellipsis() -> None:
    cell = render_cell(make_head("a", "select the next occurrence"), 20, "→")

    assert cell == "_a_ → select the ... ^"
    assert display_width(visible(cell, "a")) == 20


def test_cell_truncation_respects_wide_glyphs() -> None:
    cell = render_cell(make_head("k", "日本語のテキスト"), 16, ":")

    # 11 columns available, 7 left after the ellipsis: three 2-column glyphs
    assert cell == "_k_ : 日本語... ^ "
    assert display_width(visible(cell, "k")) == 16


@pytest.mark.parametrize("width", [13, 15, 17, 20, 31])
def test_cell_width_is_exact(width: int) -> None:
    descriptions = (
        "x",
        "select next",
        "a much longer description",
        "全角の説明文です",
        f"{HEART} love",
        f"{FAMILY} family trip {HEART}",
    )
    for desc in descriptions:
        cell = render_cell(make_head("<C-n>", desc), width, "│")
        assert display_width(visible(cell, "<C-n>")) == width


def test_cell_width_too_small_for_left_part() -> None:
    cell = render_cell(make_head("a", "xyz"), 3, "-")

    assert cell == "_a_ - ... ^"
    assert "x" not in cell


def test_auto_column_count_fits_terminal() -> None:
    layout = HintLayoutConfig(max_hint_length=20, padding=(0, 1))

    assert column_count(layout, 80) == 3
    assert column_count(layout, 84) == 3
    assert column_count(layout, 85) == 4
    assert column_count(layout, 10) == 1


def test_fixed_column_count_wins() -> None:
    layout = HintLayoutConfig(max_hint_length=20, column_count=5)

    assert column_count(layout, 10) == 5


def test_grid_is_column_major() -> None:
    layout = HintLayoutConfig(max_hint_length=10, hint_separator="-", padding=(0, 0))
    heads = [make_head("a", "one"), make_head("b", "two"), make_head("c", "three")]
    cells = {head.key: render_cell(head, 10, "-") for head in heads}

    lines = layout_grid(heads, layout, 2)

    # two rows: "c" is index 3 = (2-1)*2 + 0 + 1, i.e. column 2 of row 0
    assert lines == [f"{cells['a']} {cells['c']}", cells["b"]]


def test_grid_has_no_gap_after_last_visible_cell() -> None:
    layout = HintLayoutConfig(max_hint_length=10, hint_separator="-", padding=(0, 0))
    heads = [make_head("a", "one"), make_head("b", ""), make_head("c", None)]

    lines = layout_grid(heads, layout, 3)

    assert lines == [render_cell(heads[0], 10, "-")]
    assert len(lines[0]) == len(render_cell(heads[0], 10, "-"))


def test_grid_skips_gap_for_empty_middle_cell() -> None:
    layout = HintLayoutConfig(max_hint_length=10, hint_separator="-", padding=(0, 0))
    heads = [make_head("a", "one"), make_head("b", ""), make_head("c", "three")]

    lines = layout_grid(heads, layout, 3)

    assert lines == [
        render_cell(heads[0], 10, "-") + " " + render_cell(heads[2], 10, "-")
    ]


def test_grid_omits_rows_without_visible_cells() -> None:
    layout = HintLayoutConfig(max_hint_length=10, hint_separator="-", padding=(0, 0))
    heads = [make_head("a", "one"), make_head("b", ""), make_head("c", "three")]

    lines = layout_grid(heads, layout, 1)

    assert len(lines) == 2


def test_render_sorts_and_pads_lines() -> None:
    options = make_options(
        max_hint_length=10, column_count=2, hint_separator="-", padding=(0, 2)
    )
    heads = [make_head("c", "three"), make_head("a", "one"), make_head("b", "two")]
    a, b, c = (render_cell(make_head(k, d), 10, "-") for k, d in heads_sorted(heads))

    text = render_hints(options, heads, "normal", terminal_width=80)

    assert text == f"  {a} {c}  \n  {b}  "


def heads_sorted(heads: Sequence[Head]) -> list[tuple[str, str]]:
    return sorted((head.key, head.desc) for head in heads)


def test_vertical_padding_adds_one_extra_trailing_line() -> None:
    options = make_options(max_hint_length=10, hint_separator="-", padding=(2, 0))
    head = make_head("a", "one")

    text = render_hints(options, [head], "normal", terminal_width=80)

    assert text == "\n\n" + render_cell(head, 10, "-") + "\n\n\n"


def test_no_renderable_heads_gives_empty_string() -> None:
    options = make_options(padding=(2, 1))

    assert render_hints(options, [], "normal", terminal_width=80) == ""
    assert (
        render_hints(options, [make_head("a", "")], "insert", terminal_width=80) == ""
    )


def test_disabled_hints_use_mode_label() -> None:
    options = HintOptions.resolve(normal=False)

    text = render_hints(options, [make_head("a", "one")], "normal", terminal_width=80)

    assert text == "MultiCursor normal mode"


def test_fixed_hints_are_returned_verbatim() -> None:
    options = HintOptions.resolve(extend=" my own panel ")

    assert render_hints(options, [], "extend", terminal_width=80) == " my own panel "


def test_custom_hints_receive_heads() -> None:
    seen: list[Sequence[Head]] = []

    def custom(heads: Sequence[Head]) -> str:
        seen.append(heads)
        return ",".join(head.key for head in heads)

    options = HintOptions.resolve(insert=custom)
    heads = [make_head("b", "two"), make_head("a", "one")]

    assert render_hints(options, heads, "insert", terminal_width=80) == "b,a"
    assert list(seen[0]) == heads


def test_strategy_resolution() -> None:
    def custom(heads: Sequence[Head]) -> str:
        return ""

    assert isinstance(resolve_strategy(False), DisabledHints)
    assert resolve_strategy("text") == FixedHints("text")
    assert resolve_strategy(custom) == CustomHints(custom)
    with pytest.raises(HintOptionError):
        resolve_strategy(42)


def test_unknown_mode_has_no_options() -> None:
    with pytest.raises(KeyError):
        HintOptions().for_mode("config")


@pytest.mark.parametrize(
    "layout",
    [
        {"max_hint_length": 0},
        {"column_count": 0},
        {"padding": (1,)},
        {"padding": (-1, 0)},
        {"padding": "ab"},
    ],
)
def test_invalid_layout_is_rejected(layout: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        HintLayoutConfig(**layout)  # type: ignore[arg-type]


def test_hint_display_options_keep_user_values() -> None:
    assert hint_display_options(None, "Normal") == {
        "float_opts": {"title": " MC Normal ", "title_pos": "center"}
    }

    merged = hint_display_options(
        {
            "float_opts": {"title_pos": "left", "border": "rounded"},
            "position": "bottom",
        },
        "Extend",
    )

    assert merged == {
        "float_opts": {
            "title": " MC Extend ",
            "title_pos": "left",
            "border": "rounded",
        },
        "position": "bottom",
    }


def test_end_to_end_single_line_panel() -> None:
    options = make_options(max_hint_length=20, hint_separator="→", padding=(0, 1))
    heads = normalize_heads(
        {
            "a": Action(method=lambda: None, opts=ActionOptions(desc="select next")),
            "b": Action(method=lambda: None, opts=ActionOptions(desc="")),
        },
        True,
    )

    text = render_hints(options, heads, "normal", terminal_width=80)

    assert "\n" not in text
    assert text == " _a_ → select next^     "
    assert display_width(visible(text, "a")) == 22


def test_cell_with_emoji_description_keeps_exact_width() -> None:
    cell = render_cell(make_head("a", f"{HEART} love"), 20, "-")

    assert cell == f"_a_ - {HEART} love^" + " " * 8
    assert display_width(visible(cell, "a")) == 20


def test_cell_truncation_keeps_zwj_sequence_whole() -> None:
    cell = render_cell(make_head("a", f"xxx{FAMILY}yyyyy"), 13, "-")

    # 8 columns available, 4 after the ellipsis: the family glyph would need 5
    assert cell == "_a_ - xxx... ^ "
    assert display_width(visible(cell, "a")) == 13
