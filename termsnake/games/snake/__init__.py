"""
Snake game module for Terminal Snake.
"""

from .game import GameState, PlayerState, Direction, FoodPolicy, GridTooSmallError
from .controller import SnakeController, grid_dimension
from .renderer import SnakeRenderer
from .config import SnakeConfig

__all__ = [
    'GameState',
    'PlayerState',
    'Direction',
    'FoodPolicy',
    'GridTooSmallError',
    'SnakeController',
    'SnakeRenderer',
    'SnakeConfig',
    'grid_dimension',
]
