"""Textual-facing bridge between key events and the in-process overlay."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from multicursor_overlay.overlay import KeyDispatcher


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


KEY_ALIASES = {
    "escape": "<Esc>",
    "enter": "<CR>",
    "tab": "<Tab>",
    "backspace": "<BS>",
    "space": "<Space>",
    "up": "<Up>",
    "down": "<Down>",
    "left": "<Left>",
    "right": "<Right>",
}


def textual_key_to_token(key: str, character: Optional[str] = None) -> str:
    """Translate a Textual key name into the notation heads are bound with."""

    if key in KEY_ALIASES:
        return KEY_ALIASES[key]
    if key.startswith("ctrl+") and len(key) > len("ctrl+"):
        return f"<C-{key[len('ctrl+'):]}>"
    if character and len(character) == 1 and character.isprintable():
        return character
    return key


_KEY_MARKUP = re.compile(r"_(\S+?)_ ")
# a closing marker only has padding before the next cell or the line end
_CELL_MARKER = re.compile(r"\^(?= *(?:$|_\S+?_ ))", re.MULTILINE)


def plain_hint(hint: str) -> str:
    """Strip key highlight markup and the cell marker for plain-text display.

    The marker becomes a space so columns stay aligned.
    """

    return _KEY_MARKUP.sub(r"\1 ", _CELL_MARKER.sub(" ", hint))


@dataclass(slots=True)
class OverlayUIHooks:
    """Callbacks the adapter uses to update Textual widgets."""

    show_hint: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualTimerScheduler:
    """Scheduler backed by ``App.set_timer``; time units are milliseconds."""

    def __init__(
        self,
        set_timer: Callable[[float, Callable[[], None]], object],
        *,
        after_fire: Callable[[], None] = _noop,
    ) -> None:
        self._set_timer = set_timer
        self._after_fire = after_fire

    def after(self, delay: int, callback: Callable[[], None]) -> None:
        def fire() -> None:
            callback()
            self._after_fire()

        self._set_timer(delay / 1000.0, fire)


class TextualOverlayAdapter:
    """Feeds Textual key events to a ``KeyDispatcher`` and mirrors its state."""

    def __init__(self, dispatcher: KeyDispatcher, hooks: OverlayUIHooks) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks

    def handle_textual_key(self, key: str, *, character: Optional[str] = None) -> bool:
        token = textual_key_to_token(key, character)
        consumed = self.dispatcher.feed(token)
        self.hooks.log(f"key {token!r} consumed={consumed}")
        self.refresh()
        return consumed

    def refresh(self) -> None:
        layer = self.dispatcher.active_layer
        if layer is None:
            self.hooks.show_hint("")
            self.hooks.update_status("multicursor: off")
            return
        self.hooks.show_hint(layer.hint)
        self.hooks.update_status(layer.name)


__all__ = [
    "KEY_ALIASES",
    "OverlayUIHooks",
    "TextualOverlayAdapter",
    "TextualTimerScheduler",
    "plain_hint",
    "textual_key_to_token",
]
