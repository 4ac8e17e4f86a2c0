"""Dataclasses describing configured actions and normalized heads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping, Optional, Tuple, Union

Handler = Callable[[], object]
ActionMethod = Union[Handler, None, Literal[False]]


def _optional_bool(value: object) -> Optional[bool]:
    if value is None:
        return None
    return bool(value)


@dataclass(frozen=True, slots=True)
class ActionOptions:
    """Per-action options as written in configuration.

    ``nowait`` stays ``None`` until normalization resolves it against the
    mode-wide default.
    """

    desc: Optional[str] = None
    exit: bool = False
    nowait: Optional[bool] = None

    @classmethod
    def coerce(cls, value: object) -> "ActionOptions":
        if isinstance(value, ActionOptions):
            return value
        if not isinstance(value, Mapping):
            return cls()
        desc = value.get("desc")
        return cls(
            desc=None if desc is None else str(desc),
            exit=bool(value.get("exit", False)),
            nowait=_optional_bool(value.get("nowait")),
        )


@dataclass(frozen=True, slots=True)
class Action:
    """A configured key action; ``method=False`` marks a disabled slot."""

    method: ActionMethod = None
    opts: ActionOptions = field(default_factory=ActionOptions)

    @property
    def disabled(self) -> bool:
        return self.method is False

    @classmethod
    def disabled_action(cls) -> "Action":
        return cls(method=False)

    @classmethod
    def coerce(cls, value: object) -> "Action":
        """Accept an ``Action`` or a ``{"method": ..., "opts": {...}}`` mapping."""

        if isinstance(value, Action):
            return value
        if not isinstance(value, Mapping):
            return cls()
        method = value.get("method")
        if method is not False and not callable(method):
            method = None
        return cls(method=method, opts=ActionOptions.coerce(value.get("opts")))


@dataclass(frozen=True, slots=True)
class HeadOptions:
    """Options carried by a normalized head; ``nowait`` is always resolved."""

    desc: Optional[str] = None
    exit: bool = False
    nowait: bool = True


@dataclass(frozen=True, slots=True)
class Head:
    """Normalized ``(key, handler, options)`` binding handed to the overlay."""

    key: str
    handler: Optional[Handler]
    options: HeadOptions = field(default_factory=HeadOptions)

    @property
    def desc(self) -> str:
        return self.options.desc or ""

    def as_tuple(self) -> Tuple[str, Optional[Handler], HeadOptions]:
        return (self.key, self.handler, self.options)


__all__ = [
    "Action",
    "ActionMethod",
    "ActionOptions",
    "Handler",
    "Head",
    "HeadOptions",
]
