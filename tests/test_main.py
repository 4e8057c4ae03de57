"""Tests for main.py - routing pygame events into the game."""

import random

import pygame
import pytest

from tilesnake.config import CFG
from tilesnake.controls import Direction, direction_for_key, is_confirm_key
from tilesnake.game import SnakeGame, Status
from tilesnake.main import handle_event
from tilesnake.timer import PygameScheduler


@pytest.fixture
def pg():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def sched(pg):
    return PygameScheduler()


@pytest.fixture
def game(renderer, sched):
    return SnakeGame(renderer, sched, CFG, rng=random.Random(3))


def drain_keys(game, sched):
    return [handle_event(game, sched, e) for e in pygame.event.get(pygame.KEYDOWN)]


class TestKeyNames:
    @pytest.mark.parametrize("key, direction", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_w, Direction.UP),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_d, Direction.RIGHT),
    ])
    def test_pygame_names_map_to_directions(self, pg, key, direction):
        assert direction_for_key(pygame.key.name(key)) is direction

    @pytest.mark.parametrize("key", [pygame.K_RETURN, pygame.K_KP_ENTER])
    def test_pygame_enter_names_confirm(self, pg, key):
        assert is_confirm_key(pygame.key.name(key))


class TestHandleEvent:
    def test_keydown_then_tick_moves_the_snake(self, game, sched):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
        assert drain_keys(game, sched) == [True]
        assert game.status is Status.UNPAUSED

        assert handle_event(game, sched, game._tick.event) is True
        assert game.state.head == (0, 1)

    def test_non_directional_key_pauses(self, game, sched):
        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        assert game.status is Status.PAUSED

    def test_tick_from_before_pause_is_not_replayed(self, game, sched):
        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))
        stale = game._tick.event
        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN))

        handle_event(game, sched, stale)
        assert game.state.head == (0, 0)

    def test_enter_restarts_after_game_over(self, game, sched):
        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
        handle_event(game, sched, game._tick.event)
        assert game.status is Status.GAME_OVER

        handle_event(game, sched, pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
        assert game.status is Status.PAUSED

    def test_quit_stops_the_loop(self, game, sched):
        assert handle_event(game, sched, pygame.event.Event(pygame.QUIT)) is False

    def test_unrelated_events_are_ignored(self, game, sched):
        assert handle_event(game, sched, pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1))) is True
        assert game.status is Status.PAUSED
