"""Turn configured key mappings into overlay heads."""

from __future__ import annotations

from typing import Mapping

from .models import Action, Head, HeadOptions


def normalize_heads(keys: Mapping[str, object] | None, nowait: bool) -> list[Head]:
    """Build heads for every enabled action in ``keys``.

    An action's own ``nowait`` (explicit ``False`` included) wins over the
    mode-wide default. Disabled actions are dropped. Ordering is left to the
    hint layout.
    """

    heads: list[Head] = []
    for key, raw in (keys or {}).items():
        action = Action.coerce(raw)
        if action.disabled:
            continue
        opts = action.opts
        heads.append(
            Head(
                key=str(key),
                handler=action.method or None,
                options=HeadOptions(
                    desc=opts.desc,
                    exit=opts.exit,
                    nowait=nowait if opts.nowait is None else opts.nowait,
                ),
            )
        )
    return heads


__all__ = ["normalize_heads"]
