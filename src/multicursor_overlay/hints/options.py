"""Hint layout options and per-mode hint strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from multicursor_overlay.errors import ConfigError

from .strategy import AutoHints, HintStrategy, resolve_strategy

Padding = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class HintLayoutConfig:
    """Geometry of the built-in hint grid.

    ``padding`` is ``(vertical, horizontal)``. ``column_count=None`` fits as
    many columns as the terminal width allows.
    """

    max_hint_length: int = 25
    column_count: Optional[int] = None
    hint_separator: str = " "
    padding: Padding = (0, 1)

    def __post_init__(self) -> None:
        if self.max_hint_length <= 0:
            raise ConfigError("max_hint_length must be positive")
        if self.column_count is not None and self.column_count <= 0:
            raise ConfigError("column_count must be positive when set")
        object.__setattr__(self, "padding", _coerce_padding(self.padding))

    @property
    def vertical_padding(self) -> int:
        return self.padding[0]

    @property
    def horizontal_padding(self) -> int:
        return self.padding[1]


def _coerce_padding(value: Sequence[int]) -> Padding:
    try:
        vertical, horizontal = (int(part) for part in value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"padding must be a (vertical, horizontal) pair, got {value!r}"
        ) from exc
    if vertical < 0 or horizontal < 0:
        raise ConfigError("padding values cannot be negative")
    return (vertical, horizontal)


@dataclass(frozen=True, slots=True)
class HintOptions:
    """Hint strategy for each mode plus the shared layout geometry."""

    normal: HintStrategy = field(default_factory=AutoHints)
    insert: HintStrategy = field(default_factory=AutoHints)
    extend: HintStrategy = field(default_factory=AutoHints)
    config: HintLayoutConfig = field(default_factory=HintLayoutConfig)

    @classmethod
    def resolve(
        cls,
        *,
        normal: object = None,
        insert: object = None,
        extend: object = None,
        config: HintLayoutConfig | None = None,
    ) -> "HintOptions":
        """Build options from raw values (``False``, text, callable or ``None``)."""

        return cls(
            normal=resolve_strategy(normal),
            insert=resolve_strategy(insert),
            extend=resolve_strategy(extend),
            config=config or HintLayoutConfig(),
        )

    def for_mode(self, mode_name: str) -> HintStrategy:
        if mode_name not in ("normal", "insert", "extend"):
            raise KeyError(f"No hint options for mode '{mode_name}'")
        return getattr(self, mode_name)


__all__ = ["HintLayoutConfig", "HintOptions", "Padding"]
