"""Exceptions raised by the overlay engine."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when configuration cannot be resolved into a usable layout."""


class OverlayError(RuntimeError):
    """Raised by the in-process overlay when a handle is misused."""


__all__ = ["ConfigError", "OverlayError"]
