"""
Snake Game Core - Pure game logic without rendering.

A GameState is advanced one logical tick at a time by update(). It is
never partially reset: restarting means building a new GameState.
"""
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Dict, List, Optional
import random

from ...core.spatial import Point


class Direction(Enum):
    """Snake movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Point:
        """Unit vector of one step in this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: Point(0, -1),
    Direction.DOWN: Point(0, 1),
    Direction.LEFT: Point(-1, 0),
    Direction.RIGHT: Point(1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class FoodPolicy(Enum):
    """
    How food is placed after it is eaten.

    INTERIOR picks any interior cell, including ones the snake occupies.
    INTERIOR_FREE only picks cells the snake does not occupy, as long as
    one exists.
    """
    INTERIOR = "interior"
    INTERIOR_FREE = "interior_free"


MIN_DIMENSION = 3


class GridTooSmallError(ValueError):
    """The grid has no interior cell to place food in."""


@dataclass
class PlayerState:
    """The snake body (front is the head) and its heading."""
    snake: Deque[Point]
    direction: Direction


class GameState:
    """
    Core Snake game logic.

    The snake moves one cell per update in its current direction. Eating
    food grows it by one segment. Running into a wall or into itself sets
    has_lost, which stays set until a new GameState replaces this one.
    """

    def __init__(
        self,
        dimension: Point,
        food_policy: FoodPolicy = FoodPolicy.INTERIOR,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game.

        Args:
            dimension: Grid width and height in cells, each at least 3
            food_policy: Placement rule used whenever food spawns
            rng: Random source (defaults to the random module)

        Raises:
            GridTooSmallError: If the grid has no interior cell for food
        """
        if dimension.x < MIN_DIMENSION or dimension.y < MIN_DIMENSION:
            raise GridTooSmallError(
                f"Grid {dimension.x}x{dimension.y} is too small, "
                f"need at least {MIN_DIMENSION}x{MIN_DIMENSION}"
            )

        self.dimension = dimension
        self.food_policy = food_policy
        self._rng = rng if rng is not None else random
        self.player = PlayerState(
            snake=deque([Point(dimension.x // 2, dimension.y // 2)]),
            direction=Direction.RIGHT,
        )
        self.last_direction = Direction.RIGHT
        self.has_lost = False
        self.food = self._spawn_food()

    @property
    def head(self) -> Point:
        return self.player.snake[0]

    @property
    def score(self) -> int:
        """Score is the snake length."""
        return len(self.player.snake)

    def update(self):
        """
        Advance the game by one tick.

        The new head is always pushed, even on a losing move, so the
        final frame shows where the snake crashed.
        """
        updated_front = self.head + self.player.direction.delta
        self.last_direction = self.player.direction

        # Ran over itself
        if updated_front in self.player.snake:
            self.has_lost = True

        # Hit the boundary
        if not self.in_bounds(updated_front):
            self.has_lost = True

        self.player.snake.appendleft(updated_front)

        if updated_front == self.food:
            self.food = self._spawn_food()
        else:
            self.player.snake.pop()

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.dimension.x and 0 <= point.y < self.dimension.y

    def _spawn_food(self) -> Point:
        if self.food_policy is FoodPolicy.INTERIOR_FREE:
            return free_food_position(self.dimension, self.player.snake, self._rng)
        return rand_food_position(self.dimension, self._rng)

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering or inspection.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [p.to_dict() for p in self.player.snake],
            "food": self.food.to_dict(),
            "direction": self.player.direction.value,
            "score": self.score,
            "has_lost": self.has_lost,
            "width": self.dimension.x,
            "height": self.dimension.y,
        }


def rand_food_position(dimension: Point, rng=random) -> Point:
    """
    Pick a uniformly random interior cell.

    Args:
        dimension: Grid size
        rng: Random source with randint()

    Returns:
        Point with 1 <= x <= width - 2 and 1 <= y <= height - 2
    """
    return Point(rng.randint(1, dimension.x - 2), rng.randint(1, dimension.y - 2))


def free_food_position(dimension: Point, occupied, rng=random) -> Point:
    """
    Pick a random interior cell not in occupied.

    Falls back to a scan of the interior once random attempts run out, and
    to rand_food_position() when the interior is completely covered.
    """
    taken = set(occupied)
    attempts = 0
    max_attempts = dimension.x * dimension.y

    while attempts < max_attempts:
        food = rand_food_position(dimension, rng)
        if food not in taken:
            return food
        attempts += 1

    free: List[Point] = [
        Point(x, y)
        for x in range(1, dimension.x - 1)
        for y in range(1, dimension.y - 1)
        if Point(x, y) not in taken
    ]
    if free:
        return rng.choice(free)

    return rand_food_position(dimension, rng)
