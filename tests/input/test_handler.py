import pygame

from dwell.input.context import InputContext
from dwell.input.handler import InputHandler
from tests.conftest import key_down, key_up, quit_event


def test_context_bind_and_unbind():
    ctx = InputContext("gameplay")
    ctx.bind(pygame.K_a, "pose.idle")

    assert ctx.get_action(pygame.K_a) == "pose.idle"

    ctx.unbind(pygame.K_a)
    ctx.unbind(pygame.K_a)  # unbinding twice is harmless

    assert ctx.get_action(pygame.K_a) is None


def test_context_copies_bindings():
    bindings = {pygame.K_a: "pose.idle"}
    ctx = InputContext("gameplay", bindings)
    ctx.bind(pygame.K_b, "pose.charge")

    assert pygame.K_b not in bindings


def test_key_down_returns_action():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))

    assert handler.process_event(key_down(pygame.K_a)) == "pose.idle"
    # Repeated presses fire every time
    assert handler.process_event(key_down(pygame.K_a)) == "pose.idle"


def test_key_release_triggers_nothing():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))

    assert handler.process_event(key_up(pygame.K_a)) is None


def test_unbound_key_and_other_events():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))

    assert handler.process_event(key_down(pygame.K_q)) is None
    assert handler.process_event(quit_event()) is None


def test_top_context_wins():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))
    handler.push_context(InputContext("debug", {pygame.K_a: "debug.toggle"}))

    assert handler.process_event(key_down(pygame.K_a)) == "debug.toggle"


def test_lower_context_reached_when_not_blocking():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))
    handler.push_context(InputContext("overlay", {pygame.K_b: "overlay.close"}))

    assert handler.process_event(key_down(pygame.K_a)) == "pose.idle"


def test_blocking_context_hides_lower():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))
    menu = InputContext("menu", {pygame.K_ESCAPE: "quit"})
    menu.blocks_lower = True
    handler.push_context(menu)

    assert handler.process_event(key_down(pygame.K_a)) is None
    assert handler.process_event(key_down(pygame.K_ESCAPE)) == "quit"


def test_pop_context():
    handler = InputHandler()
    handler.push_context(InputContext("gameplay", {pygame.K_a: "pose.idle"}))

    popped = handler.pop_context("gameplay")

    assert popped is not None and popped.name == "gameplay"
    assert handler.pop_context("gameplay") is None
    assert handler.process_event(key_down(pygame.K_a)) is None
