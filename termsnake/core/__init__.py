"""
Core abstractions for Terminal Snake.

Provides the interfaces a host (terminal, test harness) must implement to
drive a game: keyboard input, a character canvas and the frame loop.
"""

from .spatial import Point
from .input_interface import Key, KeyEventKind, KeyEvent, KeyboardInterface
from .renderer_interface import CanvasInterface, RectCharset, Pencil
from .app_interface import AppStateInterface, AppInterface

__all__ = [
    'Point',
    'Key',
    'KeyEventKind',
    'KeyEvent',
    'KeyboardInterface',
    'CanvasInterface',
    'RectCharset',
    'Pencil',
    'AppStateInterface',
    'AppInterface',
]
