"""
Curses host - window sizing, keyboard polling, drawing and the frame pump.

Terminals only report key presses, never releases, so the keys held during
a frame are the keys pressed during that frame. Holding a key still works
through the terminal's auto-repeat.
"""
import curses
import time
from typing import Callable, List, Optional, Set

from ..core.app_interface import AppInterface, AppStateInterface, FrameCallback
from ..core.input_interface import Key, KeyEvent, KeyboardInterface
from ..core.spatial import Point
from .canvas import CharCanvas


ESCAPE_CODE = 27

_LETTER_KEYS = {
    "w": Key.W,
    "a": Key.A,
    "s": Key.S,
    "d": Key.D,
    "q": Key.Q,
    "r": Key.R,
}

# Arrow keys steer like WASD
_SPECIAL_KEYS = {
    curses.KEY_UP: Key.W,
    curses.KEY_LEFT: Key.A,
    curses.KEY_DOWN: Key.S,
    curses.KEY_RIGHT: Key.D,
}


def translate_key(code: int) -> Key:
    """
    Map a curses key code to a Key.

    Args:
        code: Value returned by getch()

    Returns:
        The matching Key, or Key.UNKNOWN
    """
    if code == ESCAPE_CODE:
        return Key.ESC
    if code in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[code]
    if 0 <= code < 256:
        return _LETTER_KEYS.get(chr(code).lower(), Key.UNKNOWN)
    return Key.UNKNOWN


class CursesKeyboard(KeyboardInterface):
    """Keyboard state refreshed once per frame from getch()."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._events: List[KeyEvent] = []
        self._keys_down: Set[Key] = set()

    def poll(self):
        """Drain every pending key code."""
        events = []
        while True:
            code = self.stdscr.getch()
            if code == -1:
                break
            key = translate_key(code)
            if key is not Key.UNKNOWN:
                events.append(KeyEvent.pressed(key))

        self._events = events
        self._keys_down = {event.key for event in events}

    def last_key_events(self) -> List[KeyEvent]:
        return list(self._events)

    def get_keys_down(self) -> Set[Key]:
        return set(self._keys_down)


class TerminalAppState(AppStateInterface):
    """Frame counter, keyboard and stop flag for one run."""

    def __init__(self, keyboard: KeyboardInterface):
        self._keyboard = keyboard
        self._step = 0
        self._running = True

    @property
    def keyboard(self) -> KeyboardInterface:
        return self._keyboard

    @property
    def step(self) -> int:
        return self._step

    @property
    def is_running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def advance(self):
        self._step += 1


class CursesApp(AppInterface):
    """
    Runs a frame callback against a curses screen at a fixed frame rate.

    Use inside curses.wrapper(), which owns terminal setup and teardown.
    """

    def __init__(
        self,
        stdscr,
        fps: int = 30,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the host.

        Args:
            stdscr: The curses screen window
            fps: Target frames per second
            clock: Monotonic clock in seconds
            sleep: Sleep function used to hold the frame rate
        """
        if fps < 1:
            raise ValueError(f"fps must be >= 1, got {fps}")

        self.stdscr = stdscr
        self.fps = fps
        self._clock = clock
        self._sleep = sleep
        self.state: Optional[TerminalAppState] = None

        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            # Terminal cannot hide the cursor
            pass

    def window_size(self) -> Point:
        rows, cols = self.stdscr.getmaxyx()
        return Point(cols, rows)

    def run(self, frame_callback: FrameCallback) -> None:
        keyboard = CursesKeyboard(self.stdscr)
        self.state = TerminalAppState(keyboard)
        canvas = CharCanvas(self.window_size())
        frame_time = 1.0 / self.fps

        while self.state.is_running:
            frame_start = self._clock()

            keyboard.poll()
            canvas.clear()
            frame_callback(self.state, canvas)
            self.flush(canvas)
            self.state.advance()

            remaining = frame_time - (self._clock() - frame_start)
            if remaining > 0:
                self._sleep(remaining)

    def flush(self, canvas: CharCanvas):
        """Copy the canvas to the screen, clipped to the current terminal size."""
        screen_rows, screen_cols = self.stdscr.getmaxyx()
        rows = canvas.rows()[:screen_rows]
        for y, row in enumerate(rows):
            row = row[:screen_cols]
            # Writing the bottom-right cell moves the cursor off screen
            if y == screen_rows - 1:
                row = row[:screen_cols - 1]
            if row:
                self.stdscr.addstr(y, 0, row)
        self.stdscr.refresh()
