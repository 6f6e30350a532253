"""
Pytest configuration and fixtures for Terminal Snake tests.

Provides a scripted keyboard and app state so controllers can be driven
frame by frame, and a MagicMock curses screen so the terminal host can be
tested without a real terminal.
"""

import random
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from termsnake.core.app_interface import AppStateInterface
from termsnake.core.input_interface import KeyboardInterface, KeyEvent
from termsnake.core.spatial import Point
from termsnake.terminal.canvas import CharCanvas


class ScriptedKeyboard(KeyboardInterface):
    """Keyboard whose events and held keys are set by the test."""

    def __init__(self):
        self.events = []
        self.keys_down = set()
        self.keys_down_queries = 0

    def press(self, *keys):
        self.events.extend(KeyEvent.pressed(k) for k in keys)

    def hold(self, *keys):
        self.keys_down.update(keys)

    def next_frame(self):
        self.events = []
        self.keys_down = set()

    def last_key_events(self):
        return list(self.events)

    def get_keys_down(self):
        self.keys_down_queries += 1
        return set(self.keys_down)


class ScriptedAppState(AppStateInterface):
    """App state with a settable frame counter."""

    def __init__(self, keyboard):
        self._keyboard = keyboard
        self.frame = 0
        self.running = True

    @property
    def keyboard(self):
        return self._keyboard

    @property
    def step(self):
        return self.frame

    @property
    def is_running(self):
        return self.running

    def stop(self):
        self.running = False


@pytest.fixture
def rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def keyboard():
    return ScriptedKeyboard()


@pytest.fixture
def app_state(keyboard):
    return ScriptedAppState(keyboard)


@pytest.fixture
def window_size():
    """An 80x25 terminal, giving a 64x20 grid."""
    return Point(80, 25)


@pytest.fixture
def canvas(window_size):
    return CharCanvas(window_size)


@pytest.fixture
def mock_stdscr(monkeypatch):
    """A curses screen that reports 80x25 and has no pending input."""
    monkeypatch.setattr("curses.curs_set", MagicMock())
    stdscr = MagicMock()
    stdscr.getmaxyx.return_value = (25, 80)
    stdscr.getch.return_value = -1
    return stdscr


@pytest.fixture
def config_dir(tmp_path):
    """A config directory with default and snake settings."""
    games_dir = tmp_path / "games"
    games_dir.mkdir()

    (tmp_path / "default.yaml").write_text(
        "display:\n"
        "  fps: 24\n"
        "game:\n"
        "  frames_per_tick: 3\n",
        encoding="utf-8",
    )
    (games_dir / "snake.yaml").write_text(
        "game:\n"
        "  food_policy: interior_free\n"
        "  allow_reverse: false\n"
        "  unknown_setting: 7\n",
        encoding="utf-8",
    )

    return tmp_path
