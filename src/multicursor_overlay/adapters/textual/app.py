"""Executable Textual app that hosts the multi-cursor overlay."""

from __future__ import annotations

import argparse
import os
from typing import List, Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use multicursor_overlay.adapters.textual.app"
    ) from exc

from multicursor_overlay.config import HintLayoutConfig, HintOptions, MultiCursorConfig
from multicursor_overlay.keymaps import Action, ActionOptions
from multicursor_overlay.layers import EditingCallbacks, EditorHost, LayerController
from multicursor_overlay.overlay import KeyDispatcher
from multicursor_overlay.runtime import telemetry

from .controller import (
    OverlayUIHooks,
    TextualOverlayAdapter,
    TextualTimerScheduler,
    plain_hint,
)


def demo_config(layout: HintLayoutConfig, log: List[str]) -> MultiCursorConfig:
    """A small keymap whose actions only record what they would have done."""

    def record(label: str) -> Action:
        return Action(
            method=lambda: log.append(label), opts=ActionOptions(desc=label)
        )

    return MultiCursorConfig(
        normal_keys={
            "n": record("find next"),
            "N": record("find prev"),
            "q": record("skip"),
            "Q": record("skip prev"),
            "]": record("goto next"),
            "[": record("goto prev"),
            "u": record("undo"),
            "<C-r>": record("redo"),
            "p": record("paste after"),
            "P": record("paste before"),
            "y": record("yank"),
            "d": record("delete"),
            "z": Action.disabled_action(),
        },
        insert_keys={
            "<Esc>": Action(opts=ActionOptions(desc="exit", exit=True)),
            "<C-w>": record("delete word"),
            "<BS>": record("backspace"),
        },
        extend_keys={
            "<Esc>": Action(opts=ActionOptions(desc="exit", exit=True)),
            "w": record("word forward"),
            "b": record("word backward"),
            "o": record("swap anchor"),
            "$": record("line end"),
            "0": record("line start"),
        },
        generate_hints=HintOptions.resolve(config=layout),
    )


class MultiCursorDemoApp(App[None]):
    """Shows the hint panel for whichever layer currently receives keys."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#activity {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#hint-panel {
		height: auto;
		background: $surface-darken-1;
	}

	#status-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+n", "start_session", "Start multi-cursor"),
    ]

    def __init__(self, layout: HintLayoutConfig) -> None:
        super().__init__()
        self._layout = layout
        self._activity: List[str] = []
        self.dispatcher = KeyDispatcher()
        self.adapter = TextualOverlayAdapter(
            self.dispatcher,
            OverlayUIHooks(
                show_hint=self._show_hint,
                update_status=self._update_status,
                log=lambda line: self.log(line),
            ),
        )
        self.controller: LayerController | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="activity", markup=False)
        yield Static("", id="hint-panel", markup=False)
        yield Static("", id="status-line", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.action_start_session()

    def action_start_session(self) -> None:
        if self.controller is not None and self.controller.state.active:
            return
        host = EditorHost(
            scheduler=TextualTimerScheduler(
                self.set_timer, after_fire=self.adapter.refresh
            ),
            terminal_width=lambda: self.size.width,
            redraw=self.refresh,
        )
        callbacks = EditingCallbacks(
            insert=lambda config: self._record("insert at cursors"),
            change=lambda config: self._record("change selections"),
            append=lambda config: self._record("append after cursors"),
            exit_insert=lambda config: self._record("leave insert"),
            exit_session=lambda: self._record("session closed"),
        )
        self.controller = LayerController(
            demo_config(self._layout, self._activity),
            self.dispatcher,
            host,
            callbacks,
        )
        self.controller.start()
        self.adapter.refresh()

    def on_key(self, event: events.Key) -> None:
        if self.dispatcher.active_layer is None:
            return
        if self.adapter.handle_textual_key(event.key, character=event.character):
            event.stop()
        self._render_activity()

    def _record(self, label: str) -> None:
        self._activity.append(label)
        self._render_activity()

    def _render_activity(self) -> None:
        self.query_one("#activity", Static).update("\n".join(self._activity[-50:]))

    def _show_hint(self, hint: str) -> None:
        self.query_one("#hint-panel", Static).update(plain_hint(hint))

    def _update_status(self, status: str) -> None:
        self.query_one("#status-line", Static).update(status)


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the multi-cursor overlay demo.")
    parser.add_argument(
        "--max-hint-length",
        type=int,
        default=_env_int("MULTICURSOR_OVERLAY_MAX_HINT_LENGTH", 25),
        help="Column width of each hint cell (default: 25)",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=None,
        help="Fixed number of hint columns (default: fit terminal width)",
    )
    parser.add_argument(
        "--separator",
        default=os.environ.get("MULTICURSOR_OVERLAY_HINT_SEPARATOR", " "),
        help="Text placed between a key and its description",
    )
    parser.add_argument(
        "--padding",
        type=int,
        nargs=2,
        metavar=("VERTICAL", "HORIZONTAL"),
        default=(0, 1),
        help="Hint panel padding (default: 0 1)",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production", "quiet"),
        default=os.environ.get("MULTICURSOR_OVERLAY_LOG_PRESET"),
        help="Telemetry preset (default: configure from environment)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    layout = HintLayoutConfig(
        max_hint_length=args.max_hint_length,
        column_count=args.columns,
        hint_separator=args.separator,
        padding=tuple(args.padding),
    )
    MultiCursorDemoApp(layout).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
