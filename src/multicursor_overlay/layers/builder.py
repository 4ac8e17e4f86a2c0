"""Heads and layer specs for the Normal, Insert and Extend layers."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from multicursor_overlay.config import MultiCursorConfig
from multicursor_overlay.hints.layout import hint_display_options, render_hints
from multicursor_overlay.keymaps import Handler, Head, HeadOptions, normalize_heads
from multicursor_overlay.overlay import LayerConfig, LayerSpec, LifecycleHook

REACTIVATE_DELAY = 20
LAYER_COLOR = "pink"


class LayerMode(str, Enum):
    """The three mutually exclusive overlay layers."""

    NORMAL = "normal"
    INSERT = "insert"
    EXTEND = "extend"

    @property
    def title(self) -> str:
        return self.value.capitalize()

    @property
    def layer_name(self) -> str:
        return f"MC {self.title}"

    @property
    def editor_mode(self) -> str:
        # the editor mode the layer's keymaps are installed in
        return "i" if self is LayerMode.INSERT else "n"


def _mode_switch(key: str, handler: Handler | None, desc: str, nowait: bool) -> Head:
    return Head(key, handler, HeadOptions(desc=desc, exit=True, nowait=nowait))


def build_normal_heads(
    config: MultiCursorConfig,
    *,
    enter_insert: Handler,
    enter_change: Handler,
    enter_append: Handler,
    enter_extend: Handler,
) -> list[Head]:
    """User ``normal_keys`` followed by the exit and mode-switch heads."""

    heads = normalize_heads(config.normal_keys, config.nowait)
    keys = config.mode_keys
    heads.extend(
        [
            _mode_switch("<Esc>", None, "exit", config.nowait),
            _mode_switch(keys.insert, enter_insert, "insert mode", config.nowait),
            _mode_switch(keys.change, enter_change, "change mode", config.nowait),
            _mode_switch(keys.append, enter_append, "append mode", config.nowait),
            _mode_switch(keys.extend, enter_extend, "extend mode", config.nowait),
        ]
    )
    return heads


def build_insert_heads(config: MultiCursorConfig) -> list[Head]:
    return normalize_heads(config.insert_keys, config.nowait)


def build_extend_heads(config: MultiCursorConfig) -> list[Head]:
    return normalize_heads(config.extend_keys, config.nowait)


def build_layer_spec(
    config: MultiCursorConfig,
    mode: LayerMode,
    heads: Sequence[Head],
    *,
    on_enter: LifecycleHook,
    on_exit: LifecycleHook,
    terminal_width: int,
) -> LayerSpec:
    """Assemble the overlay payload for ``mode`` including its hint text."""

    hint = render_hints(
        config.generate_hints, heads, mode.value, terminal_width=terminal_width
    )
    return LayerSpec(
        name=mode.layer_name,
        mode=mode.editor_mode,
        heads=tuple(heads),
        hint=hint,
        config=LayerConfig(
            on_enter=on_enter,
            on_exit=on_exit,
            buffer=0,
            color=LAYER_COLOR,
            hint=hint_display_options(config.hint_config, mode.title),
        ),
    )


__all__ = [
    "LAYER_COLOR",
    "REACTIVATE_DELAY",
    "LayerMode",
    "build_extend_heads",
    "build_insert_heads",
    "build_layer_spec",
    "build_normal_heads",
]
