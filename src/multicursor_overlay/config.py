"""Resolved configuration consumed by the layer builder and controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from multicursor_overlay.errors import ConfigError
from multicursor_overlay.hints.options import HintLayoutConfig, HintOptions
from multicursor_overlay.keymaps import Action


@dataclass(frozen=True, slots=True)
class ModeKeys:
    """Keys that leave Normal mode for another layer."""

    insert: str = "i"
    change: str = "c"
    append: str = "a"
    extend: str = "e"

    def __post_init__(self) -> None:
        for name in ("insert", "change", "append", "extend"):
            if not getattr(self, name):
                raise ConfigError(f"mode_keys.{name} cannot be empty")


@dataclass(frozen=True)
class MultiCursorConfig:
    """Everything the layers need, already merged from user and defaults."""

    normal_keys: Mapping[str, Action | Mapping[str, Any]] = field(
        default_factory=dict
    )
    insert_keys: Mapping[str, Action | Mapping[str, Any]] = field(
        default_factory=dict
    )
    extend_keys: Mapping[str, Action | Mapping[str, Any]] = field(
        default_factory=dict
    )
    nowait: bool = True
    mode_keys: ModeKeys = field(default_factory=ModeKeys)
    generate_hints: HintOptions = field(default_factory=HintOptions)
    hint_config: Optional[Mapping[str, Any]] = None

    @property
    def layout(self) -> HintLayoutConfig:
        return self.generate_hints.config


__all__ = [
    "ConfigError",
    "HintLayoutConfig",
    "HintOptions",
    "ModeKeys",
    "MultiCursorConfig",
]
