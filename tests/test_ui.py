"""
Tests for the pygame front end that do not need a window.
"""

from types import SimpleNamespace

import pygame
import pytest

from gridsnake.config import BAR_HEIGHT, CFG
from gridsnake.game import Direction
from gridsnake.main import handle_event, parse_args
from gridsnake.session import GameSession
from gridsnake.ui import (
    button_at,
    button_label,
    key_to_direction,
    layout_buttons,
    pause_label,
    status_text,
)

BOARD_PX = 400


@pytest.fixture
def session(zero_rng):
    s = GameSession(zero_rng, tick_ms=100)
    s.start(0)
    return s


@pytest.fixture
def buttons():
    return layout_buttons(BOARD_PX)


def _key(key):
    return SimpleNamespace(type=pygame.KEYDOWN, key=key)


def _click(pos, button=1):
    return SimpleNamespace(type=pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def _button(buttons, action):
    return next(b for b in buttons if b.action == action)


class TestInputMapping:
    """Keyboard bindings."""

    @pytest.mark.parametrize("key,direction", [
        (pygame.K_UP, Direction.UP),
        (pygame.K_w, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_d, Direction.RIGHT),
    ])
    def test_direction_keys(self, key, direction):
        assert key_to_direction(key) is direction

    def test_other_keys_are_unmapped(self):
        assert key_to_direction(pygame.K_x) is None


class TestStatus:
    """Overlay and button labels."""

    def test_running_has_no_overlay(self, session):
        assert status_text(session.state) is None
        assert pause_label(session.state) == "Pause"

    def test_paused(self, session):
        session.toggle_pause()
        assert status_text(session.state) == "Paused"
        assert pause_label(session.state) == "Resume"

    def test_game_over_wins_over_paused(self, session):
        session.state.paused = True
        session.state.game_over = True
        assert status_text(session.state) == "Game Over"


class TestButtons:
    """Button bar layout and hit testing."""

    def test_layout(self, buttons):
        """Six buttons sit side by side under the board."""
        assert [b.action for b in buttons] == ["pause", "reset", "up", "down", "left", "right"]
        for b in buttons:
            assert b.rect.top >= BOARD_PX
            assert b.rect.bottom <= BOARD_PX + BAR_HEIGHT
            assert b.rect.right <= BOARD_PX
        for left, right in zip(buttons, buttons[1:]):
            assert not left.rect.colliderect(right.rect)

    def test_layout_rejects_narrow_boards(self):
        with pytest.raises(ValueError):
            layout_buttons(40)

    def test_narrowest_board_has_positive_widths(self):
        for b in layout_buttons(120):
            assert b.rect.width > 0

    def test_button_at(self, buttons):
        reset = _button(buttons, "reset")
        assert button_at(buttons, reset.rect.center) is reset
        assert button_at(buttons, (5, 5)) is None

    def test_labels(self, buttons, session):
        labels = [button_label(b, session.state) for b in buttons]
        assert labels == ["Pause", "Reset", "^", "v", "<", ">"]


class TestHandleEvent:
    """Routing pygame events to the session."""

    def test_quit_event(self, session, buttons):
        assert handle_event(session, SimpleNamespace(type=pygame.QUIT), buttons, 0) is False

    @pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q])
    def test_quit_keys(self, session, buttons, key):
        assert handle_event(session, _key(key), buttons, 0) is False

    def test_direction_key(self, session, buttons):
        assert handle_event(session, _key(pygame.K_w), buttons, 0) is True
        assert session.state.pending_direction is Direction.UP

    def test_space_toggles_pause(self, session, buttons):
        handle_event(session, _key(pygame.K_SPACE), buttons, 0)
        assert session.state.paused is True

    def test_r_resets(self, session, buttons):
        old = session.state
        handle_event(session, _key(pygame.K_r), buttons, 500)
        assert session.state is not old
        assert session.running is True

    def test_click_direction_button(self, session, buttons):
        handle_event(session, _click(_button(buttons, "down").rect.center), buttons, 0)
        assert session.state.pending_direction is Direction.DOWN

    def test_click_pause_button(self, session, buttons):
        handle_event(session, _click(_button(buttons, "pause").rect.center), buttons, 0)
        assert session.state.paused is True

    def test_right_click_is_ignored(self, session, buttons):
        handle_event(session, _click(_button(buttons, "pause").rect.center, button=3), buttons, 0)
        assert session.state.paused is False

    def test_click_outside_buttons(self, session, buttons):
        assert handle_event(session, _click((1, 1)), buttons, 0) is True
        assert session.state.paused is False


class TestParseArgs:
    """Command-line configuration."""

    def test_defaults(self):
        cfg = parse_args([])
        assert cfg.seed == CFG.seed
        assert cfg.tick_ms == CFG.tick_ms
        assert cfg.grid_size == CFG.grid_size

    def test_overrides(self):
        cfg = parse_args(["--seed", "5", "--tick-ms", "80", "--grid-size", "12", "--log-level", "DEBUG"])
        assert cfg.seed == 5
        assert cfg.tick_ms == 80
        assert cfg.grid_size == 12
        assert cfg.log_level == "DEBUG"

    def test_negative_seed_means_random(self):
        assert parse_args(["--seed", "-1"]).seed is None

    @pytest.mark.parametrize("argv", [
        ["--tick-ms", "0"],
        ["--grid-size", "3"],
        ["--cell-size", "-2"],
        ["--log-level", "LOUD"],
        ["--cell-size", "1"],
        ["--grid-size", "5", "--cell-size", "20"],
    ])
    def test_rejects_bad_values(self, argv):
        with pytest.raises(SystemExit):
            parse_args(argv)
