"""
Snake Game Renderer - character-cell drawing through a Pencil.
"""

from typing import Optional

from ...core.renderer_interface import CanvasInterface, Pencil, RectCharset
from ...core.spatial import Point
from .game import GameState


class SnakeRenderer:
    """
    Draws a GameState centred in the window.

    The grid occupies (window - dimension) / 2 onwards; the boundary
    outline is drawn on the grid's outer ring of cells.
    """

    def __init__(
        self,
        window_size: Point,
        food_glyph: str = "o",
        snake_glyph: str = "▒",
        charset: Optional[RectCharset] = None,
    ):
        """
        Initialize the renderer.

        Args:
            window_size: Window size in cells, as measured at startup
            food_glyph: Character drawn for the food
            snake_glyph: Character drawn for every snake segment
            charset: Outline characters (defaults to round lines)
        """
        self.window_size = window_size
        self.food_glyph = food_glyph
        self.snake_glyph = snake_glyph
        self.charset = charset or RectCharset.simple_round_lines()

    def render(self, state: GameState, canvas: CanvasInterface, fps: int = 0) -> None:
        """
        Render the game state.

        Args:
            state: Game to draw
            canvas: Target canvas
            fps: Frame rate readout for the top-left corner
        """
        pencil = Pencil(canvas)

        if state.has_lost:
            message = f'You Lose! Score: {state.score} | Press "R" to Restart'
            pencil.set_origin(self._banner_origin(state, message)).draw_text(message, Point.zero())
            return

        score_message = f"Score: {state.score}"

        # FPS and score
        (
            pencil
            .draw_text(f"FPS: {fps}", Point.zero())
            .set_origin(self._banner_origin(state, score_message))
            .draw_text(score_message, Point.zero())
        )

        # Boundary, food, snake
        pencil.set_origin(self.grid_origin(state))
        pencil.draw_rect(self.charset, Point.zero(), state.dimension)
        pencil.draw_char(self.food_glyph, state.food)

        for segment in state.player.snake:
            pencil.draw_char(self.snake_glyph, segment)

    def grid_origin(self, state: GameState) -> Point:
        return (self.window_size - state.dimension) // 2

    def _banner_origin(self, state: GameState, message: str) -> Point:
        """
        Centred horizontally, one row above the grid.

        The column rounds toward zero when the banner is wider than the
        window.
        """
        return Point(
            int((self.window_size.x - len(message)) / 2),
            (self.window_size.y - state.dimension.y) // 2 - 1,
        )
