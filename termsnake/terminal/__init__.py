"""
Curses-backed host for Terminal Snake.
"""

from .canvas import CharCanvas
from .app import CursesApp, CursesKeyboard, TerminalAppState, translate_key

__all__ = [
    'CharCanvas',
    'CursesApp',
    'CursesKeyboard',
    'TerminalAppState',
    'translate_key',
]
