"""
Snake control loop - binds keyboard input and rendering to a GameState.

SnakeController.on_frame is the per-frame callback handed to an
AppInterface host.
"""
import random
from typing import Optional

from ...core.app_interface import AppStateInterface
from ...core.input_interface import Key, KeyEventKind
from ...core.renderer_interface import CanvasInterface
from ...core.spatial import Point
from ...utils.fps_counter import FPSCounter
from .config import SnakeConfig
from .game import Direction, GameState
from .renderer import SnakeRenderer


MOVEMENT_KEYS = {
    Key.W: Direction.UP,
    Key.S: Direction.DOWN,
    Key.A: Direction.LEFT,
    Key.D: Direction.RIGHT,
}

QUIT_KEYS = (Key.ESC, Key.Q)
RESTART_KEY = Key.R


def grid_dimension(window_size: Point, numerator: int = 4, denominator: int = 5) -> Point:
    """
    Scale the window size down to the grid size.

    Args:
        window_size: Window size in cells
        numerator: Scale numerator
        denominator: Scale denominator

    Returns:
        Grid size, floored independently per axis
    """
    return (window_size * numerator) // denominator


class SnakeController:
    """
    Owns the one live GameState and drives it once per frame.

    Restarting replaces the state wholesale with a new GameState sized from
    the window size captured at construction.
    """

    def __init__(
        self,
        window_size: Point,
        config: Optional[SnakeConfig] = None,
        rng: Optional[random.Random] = None,
        fps_counter: Optional[FPSCounter] = None,
    ):
        """
        Initialize the controller and the first game.

        Args:
            window_size: Window size in cells at startup
            config: Game configuration (defaults to SnakeConfig())
            rng: Random source shared by every game this controller builds
            fps_counter: Frame rate counter for the readout

        Raises:
            ValueError: If the window is too small for a playable grid
        """
        self.config = config or SnakeConfig()
        self.window_size = window_size
        self.dimension = grid_dimension(
            window_size, self.config.grid_scale_num, self.config.grid_scale_den
        )
        self.rng = rng
        self.fps_counter = fps_counter or FPSCounter()
        self.renderer = SnakeRenderer(
            window_size,
            food_glyph=self.config.food_glyph,
            snake_glyph=self.config.snake_glyph,
            charset=self.config.border_charset(),
        )
        self.best_score = 0
        self.state = self.new_game()

    def new_game(self) -> GameState:
        return GameState(self.dimension, food_policy=self.config.food_policy, rng=self.rng)

    def restart(self):
        """Replace the current game with a fresh one."""
        self.record_score()
        self.state = self.new_game()

    def on_frame(self, app_state: AppStateInterface, canvas: CanvasInterface):
        """
        Process one frame: input, simulation, drawing.

        Args:
            app_state: Host state for this frame
            canvas: Cleared canvas to draw on
        """
        keyboard = app_state.keyboard

        for event in keyboard.last_key_events():
            if event.kind is not KeyEventKind.PRESSED:
                continue
            if event.key in QUIT_KEYS:
                app_state.stop()
            elif event.key is RESTART_KEY:
                self.restart()

        # Checked in a fixed order, the last held key wins
        keys_down = keyboard.get_keys_down()
        for key, direction in MOVEMENT_KEYS.items():
            if key in keys_down:
                self.steer(direction)

        self.fps_counter.update()

        if app_state.step % self.config.frames_per_tick == 0 and not self.state.has_lost:
            self.state.update()
            if self.state.has_lost:
                self.record_score()

        self.renderer.render(self.state, canvas, fps=self.fps_counter.count())

    def steer(self, direction: Direction):
        """
        Overwrite the heading.

        With reversing disabled, a heading opposite to the last move is
        ignored, however many turns were queued since that move.
        """
        if not self.config.allow_reverse and direction is self.state.last_direction.opposite:
            return
        self.state.player.direction = direction

    def record_score(self):
        """Fold the current game into the session best score."""
        self.best_score = max(self.best_score, self.state.score)
