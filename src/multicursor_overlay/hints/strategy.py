"""How a mode's hint text is produced, resolved once from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Union

from multicursor_overlay.errors import ConfigError
from multicursor_overlay.keymaps import Head

HintFunction = Callable[[Sequence[Head]], str]


@dataclass(frozen=True, slots=True)
class AutoHints:
    """Use the built-in grid layout."""


@dataclass(frozen=True, slots=True)
class DisabledHints:
    """Show only a one-line mode label."""


@dataclass(frozen=True, slots=True)
class FixedHints:
    text: str


@dataclass(frozen=True, slots=True)
class CustomHints:
    render: HintFunction


HintStrategy = Union[AutoHints, DisabledHints, FixedHints, CustomHints]


class HintOptionError(ConfigError):
    """Raised for a hint option that is not ``False``, text, callable or ``None``."""


def resolve_strategy(option: object) -> HintStrategy:
    """Map a raw per-mode ``generate_hints`` value onto a strategy."""

    if isinstance(option, (AutoHints, DisabledHints, FixedHints, CustomHints)):
        return option
    if option is None or option is True:
        return AutoHints()
    if option is False:
        return DisabledHints()
    if isinstance(option, str):
        return FixedHints(option)
    if callable(option):
        return CustomHints(option)
    raise HintOptionError(
        f"Unsupported hint option {option!r}; "
        "expected False, a string, a callable or None"
    )


__all__ = [
    "AutoHints",
    "CustomHints",
    "DisabledHints",
    "FixedHints",
    "HintFunction",
    "HintOptionError",
    "HintStrategy",
    "resolve_strategy",
]
