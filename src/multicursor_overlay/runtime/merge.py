"""Mapping merge helpers."""

from __future__ import annotations

from typing import Any, Dict, Mapping


def deep_extend_keep(*layers: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Deep-merge mappings, keeping the value from the leftmost mapping.

    Nested mappings are merged recursively; on a conflict between a mapping
    and a scalar the earlier value wins outright. Inputs are not mutated.
    """

    result: Dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        for key, value in layer.items():
            if key not in result:
                result[key] = (
                    deep_extend_keep(value) if isinstance(value, Mapping) else value
                )
            elif isinstance(result[key], dict) and isinstance(value, Mapping):
                result[key] = deep_extend_keep(result[key], value)
    return result


__all__ = ["deep_extend_keep"]
