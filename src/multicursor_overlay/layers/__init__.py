"""Mode layers and the controller that switches between them."""

from .builder import (
    REACTIVATE_DELAY,
    LayerMode,
    build_extend_heads,
    build_insert_heads,
    build_layer_spec,
    build_normal_heads,
)
from .controller import EditingCallbacks, EditorHost, LayerController, SessionState

__all__ = [
    "REACTIVATE_DELAY",
    "EditingCallbacks",
    "EditorHost",
    "LayerController",
    "LayerMode",
    "SessionState",
    "build_extend_heads",
    "build_insert_heads",
    "build_layer_spec",
    "build_normal_heads",
]
