"""Modal multi-cursor keybinding layers with generated hint panels."""

__all__ = [
    "adapters",
    "config",
    "errors",
    "hints",
    "keymaps",
    "layers",
    "overlay",
    "runtime",
]

__version__ = "0.1.0"
