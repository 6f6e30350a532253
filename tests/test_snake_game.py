"""
Tests for the Snake game state model.

These tests verify movement, growth, food placement and the loss rules.
"""

import random
from collections import deque

import pytest

from termsnake.core.spatial import Point
from termsnake.games.snake.game import (
    Direction,
    FoodPolicy,
    GameState,
    free_food_position,
    rand_food_position,
)


def make_state(snake, direction=Direction.RIGHT, food=Point(9, 9), dimension=Point(20, 20), **kwargs):
    """Build a GameState and overwrite its snake, heading and food."""
    state = GameState(dimension, rng=random.Random(0), **kwargs)
    state.player.snake = deque(snake)
    state.player.direction = direction
    state.food = food
    return state


class TestDirection:
    """Tests for the Direction enum."""

    def test_unit_vectors(self):
        """Test every heading maps to its unit vector."""
        assert Direction.UP.delta == Point(0, -1)
        assert Direction.DOWN.delta == Point(0, 1)
        assert Direction.LEFT.delta == Point(-1, 0)
        assert Direction.RIGHT.delta == Point(1, 0)

    def test_opposites(self):
        """Test opposite is symmetric."""
        for direction in Direction:
            assert direction.opposite.opposite is direction
            assert direction.opposite.delta + direction.delta == Point(0, 0)


class TestGameStateInit:
    """Tests for building a new game."""

    def test_initial_state(self, rng):
        """Test a new game has one segment in the centre heading right."""
        state = GameState(Point(21, 11), rng=rng)

        assert list(state.player.snake) == [Point(10, 5)]
        assert state.player.direction is Direction.RIGHT
        assert state.has_lost is False
        assert state.score == 1

    def test_initial_food_in_interior(self, rng):
        """Test the first food lies in the interior."""
        for _ in range(50):
            state = GameState(Point(5, 4), rng=rng)
            assert 1 <= state.food.x <= 3
            assert 1 <= state.food.y <= 2

    def test_smallest_grid(self, rng):
        """Test a 3x3 grid has exactly one food cell."""
        state = GameState(Point(3, 3), rng=rng)

        assert state.food == Point(1, 1)

    @pytest.mark.parametrize("dimension", [Point(2, 10), Point(10, 2), Point(0, 0), Point(-5, 7)])
    def test_too_small_grid_rejected(self, dimension):
        """Test grids without an interior fail immediately."""
        with pytest.raises(ValueError, match="too small"):
            GameState(dimension)

    def test_restart_yields_fresh_state(self, rng):
        """Test a new GameState after a loss starts over."""
        state = make_state([Point(19, 5)])
        state.update()
        assert state.has_lost is True

        fresh = GameState(state.dimension, rng=rng)

        assert fresh.has_lost is False
        assert fresh.score == 1
        assert fresh.player.direction is Direction.RIGHT
        assert fresh.head == Point(10, 10)


class TestUpdate:
    """Tests for one tick of movement."""

    def test_eating_food_grows(self):
        """Test eating food keeps the tail and moves the food."""
        state = make_state([Point(5, 5)], food=Point(6, 5), food_policy=FoodPolicy.INTERIOR_FREE)

        state.update()

        assert list(state.player.snake) == [Point(6, 5), Point(5, 5)]
        assert state.food != Point(6, 5)
        assert state.has_lost is False

    def test_moving_drops_tail(self):
        """Test a move without food keeps the length."""
        state = make_state([Point(5, 5), Point(4, 5)])

        state.update()

        assert list(state.player.snake) == [Point(6, 5), Point(5, 5)]

    @pytest.mark.parametrize("direction,expected", [
        (Direction.UP, Point(5, 4)),
        (Direction.DOWN, Point(5, 6)),
        (Direction.LEFT, Point(4, 5)),
        (Direction.RIGHT, Point(6, 5)),
    ])
    def test_head_follows_heading(self, direction, expected):
        """Test the head moves one cell in the current heading."""
        state = make_state([Point(5, 5)], direction=direction)

        state.update()

        assert state.head == expected

    def test_records_direction_of_last_move(self):
        """Test last_direction only changes when the snake moves."""
        state = make_state([Point(5, 5)])

        state.player.direction = Direction.UP
        assert state.last_direction is Direction.RIGHT

        state.update()
        assert state.last_direction is Direction.UP

    def test_length_changes_by_at_most_one(self):
        """Test random play never shrinks or jumps the snake."""
        rng = random.Random(99)
        state = GameState(Point(12, 12), rng=rng)

        for _ in range(500):
            if state.has_lost:
                break
            state.player.direction = rng.choice(list(Direction))
            before = state.score
            state.update()
            assert state.score - before in (0, 1)

    def test_food_respawns_in_interior(self):
        """Test food stays in the interior after every respawn."""
        state = make_state([Point(2, 2)], dimension=Point(8, 6))

        for _ in range(30):
            state.player.snake = deque([Point(2, 2)])
            state.food = Point(3, 2)
            state.update()
            assert state.score == 2
            assert 1 <= state.food.x <= 6
            assert 1 <= state.food.y <= 4


class TestLoss:
    """Tests for the loss rules."""

    @pytest.mark.parametrize("head,direction", [
        (Point(0, 5), Direction.LEFT),
        (Point(5, 0), Direction.UP),
        (Point(19, 5), Direction.RIGHT),
        (Point(5, 19), Direction.DOWN),
    ])
    def test_leaving_grid_loses(self, head, direction):
        """Test moving past any edge loses on that tick."""
        state = make_state([head], direction=direction)

        state.update()

        assert state.has_lost is True

    def test_edge_cells_are_playable(self):
        """Test the outer ring is inside the grid."""
        state = make_state([Point(18, 0)])

        state.update()

        assert state.head == Point(19, 0)
        assert state.has_lost is False

    def test_running_into_body_loses(self):
        """Test moving onto a body segment loses on that tick."""
        snake = [Point(5, 5), Point(5, 6), Point(6, 6), Point(6, 5), Point(6, 4)]
        state = make_state(snake, direction=Direction.RIGHT)

        state.update()

        assert state.has_lost is True

    def test_reversing_into_neck_loses(self):
        """Test turning straight back collides with the second segment."""
        state = make_state([Point(5, 5), Point(4, 5)], direction=Direction.LEFT)

        state.update()

        assert state.has_lost is True

    def test_losing_move_is_still_drawn(self):
        """Test the crashing head is pushed and the tail dropped."""
        state = make_state([Point(19, 5), Point(18, 5)])

        state.update()

        assert list(state.player.snake) == [Point(20, 5), Point(19, 5)]

    def test_loss_is_permanent(self):
        """Test further updates never clear the loss."""
        state = make_state([Point(19, 5)])
        state.update()

        for direction in (Direction.LEFT, Direction.LEFT, Direction.UP):
            state.player.direction = direction
            state.update()
            assert state.has_lost is True


class TestFoodPlacement:
    """Tests for the food placement rules."""

    def test_rand_food_covers_interior(self):
        """Test uniform placement reaches every interior cell and nothing else."""
        rng = random.Random(7)
        dimension = Point(5, 4)

        seen = {rand_food_position(dimension, rng) for _ in range(500)}

        assert seen == {Point(x, y) for x in range(1, 4) for y in range(1, 3)}

    def test_interior_policy_may_hit_snake(self):
        """Test the default policy ignores the snake."""
        state = GameState(Point(3, 3), rng=random.Random(0))
        state.player.snake = deque([Point(0, 1), Point(1, 1)])
        state.player.direction = Direction.RIGHT
        state.food = Point(1, 1)

        state.food = state._spawn_food()

        assert state.food == Point(1, 1)

    def test_free_policy_avoids_snake(self):
        """Test the free policy skips occupied cells."""
        rng = random.Random(3)
        dimension = Point(6, 6)
        occupied = [Point(x, y) for x in range(1, 5) for y in range(1, 5) if (x, y) != (3, 2)]

        for _ in range(10):
            assert free_food_position(dimension, occupied, rng) == Point(3, 2)

    def test_free_policy_full_interior(self):
        """Test a covered interior still yields an interior cell."""
        occupied = [Point(1, 1)]

        assert free_food_position(Point(3, 3), occupied, random.Random(0)) == Point(1, 1)

    def test_free_policy_used_on_respawn(self):
        """Test a free-policy game never drops food on the snake."""
        rng = random.Random(11)
        state = make_state(
            [Point(2, 1), Point(1, 1)],
            food=Point(3, 1),
            dimension=Point(6, 4),
            food_policy=FoodPolicy.INTERIOR_FREE,
        )
        state._rng = rng

        state.update()

        assert state.food not in state.player.snake


class TestGetState:
    """Tests for the state snapshot."""

    def test_snapshot_fields(self):
        """Test get_state reports the board."""
        state = make_state([Point(5, 5), Point(4, 5)], food=Point(2, 3))

        snapshot = state.get_state()

        assert snapshot["snake"] == [{"x": 5, "y": 5}, {"x": 4, "y": 5}]
        assert snapshot["food"] == {"x": 2, "y": 3}
        assert snapshot["direction"] == "right"
        assert snapshot["score"] == 2
        assert snapshot["has_lost"] is False
        assert snapshot["width"] == 20
        assert snapshot["height"] == 20
