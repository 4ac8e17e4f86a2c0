from __future__ import annotations

from typing import List

import pytest

from multicursor_overlay.errors import OverlayError
from multicursor_overlay.keymaps import Head, HeadOptions
from multicursor_overlay.overlay import KeyDispatcher, LayerConfig, LayerSpec


def make_spec(
    name: str,
    events: List[str],
    heads: tuple[Head, ...] = (),
) -> LayerSpec:
    return LayerSpec(
        name=name,
        mode="n",
        heads=heads,
        hint=f"hint for {name}",
        config=LayerConfig(
            on_enter=lambda: events.append(f"enter:{name}"),
            on_exit=lambda: events.append(f"exit:{name}"),
        ),
    )


def test_activate_runs_on_enter_once() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    layer = dispatcher.build(make_spec("one", events))

    layer.activate()
    layer.activate()

    assert events == ["enter:one"]
    assert layer.active
    assert dispatcher.active_layer is layer


def test_activating_another_layer_exits_the_current_one() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    first = dispatcher.build(make_spec("one", events))
    second = dispatcher.build(make_spec("two", events))

    first.activate()
    second.activate()

    assert events == ["enter:one", "exit:one", "enter:two"]
    assert not first.active
    assert second.active


def test_non_exit_head_keeps_layer_active() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    head = Head("n", lambda: events.append("next"), HeadOptions(desc="next"))
    layer = dispatcher.build(make_spec("one", events, (head,)))
    layer.activate()

    assert dispatcher.feed("n") is True
    assert dispatcher.feed("n") is True

    assert events == ["enter:one", "next", "next"]
    assert layer.active


def test_exit_head_runs_handler_before_exit() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    head = Head("q", lambda: events.append("quit"), HeadOptions(exit=True))
    layer = dispatcher.build(make_spec("one", events, (head,)))
    layer.activate()

    dispatcher.feed("q")

    assert events == ["enter:one", "quit", "exit:one"]
    assert dispatcher.active_layer is None


def test_exit_head_that_switches_layers_does_not_exit_the_new_one() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    second = dispatcher.build(make_spec("two", events))
    head = Head("s", second.activate, HeadOptions(exit=True))
    first = dispatcher.build(make_spec("one", events, (head,)))
    first.activate()

    dispatcher.feed("s")

    assert events == ["enter:one", "exit:one", "enter:two"]
    assert dispatcher.active_layer is second


def test_head_without_handler_only_exits() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    head = Head("<Esc>", None, HeadOptions(desc="exit", exit=True))
    layer = dispatcher.build(make_spec("one", events, (head,)))
    layer.activate()

    assert dispatcher.feed("<Esc>") is True
    assert events == ["enter:one", "exit:one"]


def test_unbound_keys_pass_through() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    layer = dispatcher.build(make_spec("one", events))

    assert dispatcher.feed("x") is False
    layer.activate()
    assert dispatcher.feed("x") is False
    assert layer.active


def test_exit_without_active_layer_is_harmless() -> None:
    events: List[str] = []
    dispatcher = KeyDispatcher()
    layer = dispatcher.build(make_spec("one", events))

    dispatcher.exit()
    layer.activate()
    dispatcher.exit()
    dispatcher.exit()

    assert events == ["enter:one", "exit:one"]


def test_foreign_handle_is_rejected() -> None:
    events: List[str] = []
    layer = KeyDispatcher().build(make_spec("one", events))

    with pytest.raises(OverlayError):
        KeyDispatcher().activate(layer)


def test_spec_exposes_hint_and_frozen_display_options() -> None:
    dispatcher = KeyDispatcher()
    spec = LayerSpec(
        name="one",
        mode="n",
        heads=[],
        hint="panel",
        config=LayerConfig(hint={"float_opts": {"title": " MC "}}),
    )
    layer = dispatcher.build(spec)

    assert layer.hint == "panel"
    assert spec.heads == ()
    assert spec.config.color == "pink"
    with pytest.raises(TypeError):
        spec.config.hint["extra"] = 1  # type: ignore[index]
