"""Textual adapter for the multi-cursor overlay."""

from .controller import (
    OverlayUIHooks,
    TextualOverlayAdapter,
    TextualTimerScheduler,
    plain_hint,
    textual_key_to_token,
)

__all__ = [
    "OverlayUIHooks",
    "TextualOverlayAdapter",
    "TextualTimerScheduler",
    "plain_hint",
    "textual_key_to_token",
]
