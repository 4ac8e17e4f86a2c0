"""Configured actions and their normalization into overlay heads."""

from .models import Action, ActionOptions, Handler, Head, HeadOptions
from .normalizer import normalize_heads

__all__ = [
    "Action",
    "ActionOptions",
    "Handler",
    "Head",
    "HeadOptions",
    "normalize_heads",
]
