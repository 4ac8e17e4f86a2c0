"""Overlay primitive contract and the in-process key dispatcher."""

from .dispatcher import DispatchLayer, KeyDispatcher
from .protocol import (
    LayerConfig,
    LayerHandle,
    LayerSpec,
    LifecycleHook,
    OverlayPrimitive,
)

__all__ = [
    "DispatchLayer",
    "KeyDispatcher",
    "LayerConfig",
    "LayerHandle",
    "LayerSpec",
    "LifecycleHook",
    "OverlayPrimitive",
]
