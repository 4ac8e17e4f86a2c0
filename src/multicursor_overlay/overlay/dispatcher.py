"""In-process overlay primitive that routes keys to the active layer."""

from __future__ import annotations

from typing import Dict, Optional

from multicursor_overlay.errors import OverlayError
from multicursor_overlay.keymaps import Head
from multicursor_overlay.runtime import telemetry

from .protocol import LayerSpec


class DispatchLayer:
    """Handle returned from ``KeyDispatcher.build``."""

    def __init__(self, dispatcher: "KeyDispatcher", spec: LayerSpec) -> None:
        self.dispatcher = dispatcher
        self.spec = spec
        self._heads: Dict[str, Head] = {head.key: head for head in spec.heads}

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def hint(self) -> str:
        return self.spec.hint

    @property
    def active(self) -> bool:
        return self.dispatcher.active_layer is self

    def head_for(self, key: str) -> Optional[Head]:
        return self._heads.get(key)

    def activate(self) -> None:
        self.dispatcher.activate(self)

    def __repr__(self) -> str:
        return f"DispatchLayer({self.spec.name!r}, active={self.active})"


class KeyDispatcher:
    """Owns the single layer receiving input and runs its heads.

    Activating a layer while another one is active exits the other one first.
    Re-activating the active layer does nothing.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._active: Optional[DispatchLayer] = None
        self._logger_name = logger_name or "multicursor_overlay.overlay"

    @property
    def active_layer(self) -> Optional[DispatchLayer]:
        return self._active

    def build(self, spec: LayerSpec) -> DispatchLayer:
        telemetry.record_event(
            "layer.build",
            data={"layer": spec.name, "heads": len(spec.heads)},
            logger_name=self._logger_name,
        )
        return DispatchLayer(self, spec)

    def activate(self, layer: DispatchLayer) -> None:
        if layer.dispatcher is not self:
            raise OverlayError(f"Layer '{layer.name}' belongs to another dispatcher")
        if self._active is layer:
            return
        if self._active is not None:
            self._deactivate()
        self._active = layer
        telemetry.record_event(
            "layer.activate",
            data={"layer": layer.name},
            logger_name=self._logger_name,
        )
        layer.spec.config.on_enter()

    def feed(self, key: str) -> bool:
        """Dispatch ``key`` to the active layer; ``False`` when nothing handled it."""

        layer = self._active
        if layer is None:
            return False
        head = layer.head_for(key)
        if head is None:
            return False

        with telemetry.span(
            "overlay::feed",
            logger_name=self._logger_name,
            component=layer.name,
            metadata={"key": key},
        ):
            if head.handler is not None:
                head.handler()
            if head.options.exit and self._active is layer:
                self._deactivate()
        return True

    def exit(self) -> None:
        if self._active is not None:
            self._deactivate()

    def _deactivate(self) -> None:
        layer = self._active
        if layer is None:
            return
        self._active = None
        telemetry.record_event(
            "layer.exit",
            data={"layer": layer.name},
            logger_name=self._logger_name,
        )
        layer.spec.config.on_exit()


__all__ = ["DispatchLayer", "KeyDispatcher"]
