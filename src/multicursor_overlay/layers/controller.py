"""Layer controller wiring Normal/Insert/Extend transitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from multicursor_overlay.config import MultiCursorConfig
from multicursor_overlay.keymaps import Head
from multicursor_overlay.overlay import LayerHandle, LifecycleHook, OverlayPrimitive
from multicursor_overlay.runtime import telemetry
from multicursor_overlay.runtime.scheduler import ManualScheduler, Scheduler

from .builder import (
    REACTIVATE_DELAY,
    LayerMode,
    build_extend_heads,
    build_insert_heads,
    build_layer_spec,
    build_normal_heads,
)

EditingCallback = Callable[[MultiCursorConfig], None]

_LOGGER_NAME = "multicursor_overlay.layers"


def _ignore(config: MultiCursorConfig) -> None:  # pragma: no cover - default hook
    del config


def _noop() -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditingCallbacks:
    """Editing commands owned by the host; the controller only sequences them."""

    insert: EditingCallback = _ignore
    change: EditingCallback = _ignore
    append: EditingCallback = _ignore
    exit_insert: EditingCallback = _ignore
    exit_session: Callable[[], None] = _noop


@dataclass(slots=True)
class EditorHost:
    """Host editor services the layers depend on."""

    scheduler: Scheduler = field(default_factory=ManualScheduler)
    terminal_width: Callable[[], int] = lambda: 80
    redraw: Callable[[], None] = _noop


@dataclass(slots=True)
class SessionState:
    """Session-wide flags shared by every layer callback."""

    transition_in_progress: bool = False
    anchor_set: bool = False
    active: bool = False
    active_layer: Optional[LayerMode] = None


class LayerController:
    """Creates layer handles lazily and moves input between them.

    Transitions only happen from head handlers and ``on_exit`` callbacks;
    ``start`` is the single entry point into the session.
    """

    def __init__(
        self,
        config: MultiCursorConfig,
        overlay: OverlayPrimitive,
        host: EditorHost | None = None,
        callbacks: EditingCallbacks | None = None,
        *,
        state: SessionState | None = None,
    ) -> None:
        self.config = config
        self.overlay = overlay
        self.host = host or EditorHost()
        self.callbacks = callbacks or EditingCallbacks()
        self.state = state or SessionState()
        self.normal: Optional[LayerHandle] = None
        self.insert: Optional[LayerHandle] = None
        self.extend: Optional[LayerHandle] = None

    def start(self) -> LayerHandle:
        self.state.active = True
        layer = self.normal or self.create_normal()
        layer.activate()
        return layer

    def create_normal(self) -> LayerHandle:
        heads = build_normal_heads(
            self.config,
            enter_insert=lambda: self._enter_insert(self.callbacks.insert),
            enter_change=lambda: self._enter_insert(self.callbacks.change),
            enter_append=lambda: self._enter_insert(self.callbacks.append),
            enter_extend=self._enter_extend,
        )
        self.normal = self._build(
            LayerMode.NORMAL, heads, self._normal_entered, self._normal_exited
        )
        return self.normal

    def create_insert(self) -> LayerHandle:
        heads = build_insert_heads(self.config)
        self.insert = self._build(
            LayerMode.INSERT, heads, self._insert_entered, self._insert_exited
        )
        return self.insert

    def create_extend(self) -> LayerHandle:
        heads = build_extend_heads(self.config)
        self.extend = self._build(
            LayerMode.EXTEND, heads, self._extend_entered, self._extend_exited
        )
        return self.extend

    def reactivate_normal(self) -> None:
        """Give input back to Normal; safe to call repeatedly."""

        if not self.state.active or self.normal is None:
            return
        if self.state.active_layer is LayerMode.NORMAL:
            return
        self.normal.activate()

    def _build(
        self,
        mode: LayerMode,
        heads: Sequence[Head],
        on_enter: LifecycleHook,
        on_exit: LifecycleHook,
    ) -> LayerHandle:
        spec = build_layer_spec(
            self.config,
            mode,
            heads,
            on_enter=on_enter,
            on_exit=on_exit,
            terminal_width=self.host.terminal_width(),
        )
        return self.overlay.build(spec)

    def _begin_transition(self, target: LayerMode) -> None:
        self.state.transition_in_progress = True
        telemetry.record_event(
            "transition.start",
            data={"target": target.value},
            logger_name=_LOGGER_NAME,
        )

    def _enter_insert(self, editing: EditingCallback) -> None:
        self._begin_transition(LayerMode.INSERT)
        editing(self.config)
        layer = self.insert or self.create_insert()
        layer.activate()

    def _enter_extend(self) -> None:
        self._begin_transition(LayerMode.EXTEND)
        layer = self.extend or self.create_extend()
        layer.activate()

    def _entered(self, mode: LayerMode) -> None:
        self.state.active_layer = mode

    def _exited(self, mode: LayerMode) -> None:
        if self.state.active_layer is mode:
            self.state.active_layer = None

    def _normal_entered(self) -> None:
        self._entered(LayerMode.NORMAL)
        self.state.anchor_set = True

    def _normal_exited(self) -> None:
        self._exited(LayerMode.NORMAL)
        if not self.state.transition_in_progress:
            self._teardown()

    def _insert_entered(self) -> None:
        self._entered(LayerMode.INSERT)

    def _insert_exited(self) -> None:
        self._exited(LayerMode.INSERT)
        self.host.scheduler.after(REACTIVATE_DELAY, self._leave_insert)

    def _leave_insert(self) -> None:
        self.callbacks.exit_insert(self.config)
        self.state.transition_in_progress = False
        self.reactivate_normal()

    def _extend_entered(self) -> None:
        self._entered(LayerMode.EXTEND)
        self.host.redraw()

    def _extend_exited(self) -> None:
        self._exited(LayerMode.EXTEND)
        self.state.transition_in_progress = False
        self.host.scheduler.after(REACTIVATE_DELAY, self.reactivate_normal)

    def _teardown(self) -> None:
        telemetry.record_event("session.teardown", logger_name=_LOGGER_NAME)
        self.state.active = False
        self.state.anchor_set = False
        self.state.active_layer = None
        self.normal = self.insert = self.extend = None
        self.callbacks.exit_session()


__all__ = [
    "EditingCallback",
    "EditingCallbacks",
    "EditorHost",
    "LayerController",
    "SessionState",
]
