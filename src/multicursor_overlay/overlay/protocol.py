"""Contract between the layer controller and the modal overlay primitive."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol, Tuple

from multicursor_overlay.keymaps import Head

LifecycleHook = Callable[[], None]


def _noop() -> None:
    return None


@dataclass(frozen=True, slots=True)
class LayerConfig:
    """Lifecycle and presentation settings for one overlay layer.

    ``color="pink"`` means heads fire without a disambiguation timeout and
    unbound keys pass through without ending the layer.
    """

    on_enter: LifecycleHook = _noop
    on_exit: LifecycleHook = _noop
    buffer: int = 0
    color: str = "pink"
    hint: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hint", MappingProxyType(dict(self.hint)))


@dataclass(frozen=True, slots=True)
class LayerSpec:
    """Everything ``OverlayPrimitive.build`` needs to create a layer."""

    name: str
    mode: str
    heads: Tuple[Head, ...]
    hint: str
    config: LayerConfig = field(default_factory=LayerConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "heads", tuple(self.heads))


class LayerHandle(Protocol):
    def activate(self) -> None: ...


class OverlayPrimitive(Protocol):
    def build(self, spec: LayerSpec) -> LayerHandle: ...


__all__ = [
    "LayerConfig",
    "LayerHandle",
    "LayerSpec",
    "LifecycleHook",
    "OverlayPrimitive",
]
