"""
Snake game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any

from ...core.renderer_interface import RectCharset
from .game import FoodPolicy


# Outline charsets selectable with border_style
BORDER_STYLES = {
    "round": RectCharset.simple_round_lines,
    "square": RectCharset.simple_lines,
    "ascii": RectCharset.ascii,
}


@dataclass
class SnakeConfig:
    """Configuration for Snake game."""

    # Grid size as a fraction of the window, per axis
    grid_scale_num: int = 4
    grid_scale_den: int = 5

    # Render frames per logical tick
    frames_per_tick: int = 2

    food_policy: FoodPolicy = FoodPolicy.INTERIOR
    allow_reverse: bool = True

    # Glyphs
    food_glyph: str = "o"
    snake_glyph: str = "▒"
    border_style: str = "round"

    def __post_init__(self):
        if not isinstance(self.food_policy, FoodPolicy):
            self.food_policy = parse_food_policy(self.food_policy)
        if self.frames_per_tick < 1:
            raise ValueError(f"frames_per_tick must be >= 1, got {self.frames_per_tick}")
        if self.grid_scale_den < 1:
            raise ValueError(f"grid_scale_den must be >= 1, got {self.grid_scale_den}")
        if self.border_style not in BORDER_STYLES:
            choices = ", ".join(BORDER_STYLES)
            raise ValueError(f"Unknown border_style '{self.border_style}' (expected one of: {choices})")

    def border_charset(self) -> RectCharset:
        return BORDER_STYLES[self.border_style]()

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "grid_scale_num": self.grid_scale_num,
            "grid_scale_den": self.grid_scale_den,
            "frames_per_tick": self.frames_per_tick,
            "food_policy": self.food_policy.value,
            "allow_reverse": self.allow_reverse,
            "food_glyph": self.food_glyph,
            "snake_glyph": self.snake_glyph,
            "border_style": self.border_style,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary."""
        return cls(
            grid_scale_num=data.get("grid_scale_num", 4),
            grid_scale_den=data.get("grid_scale_den", 5),
            frames_per_tick=data.get("frames_per_tick", 2),
            food_policy=parse_food_policy(data.get("food_policy", "interior")),
            allow_reverse=data.get("allow_reverse", True),
            food_glyph=data.get("food_glyph", "o"),
            snake_glyph=data.get("snake_glyph", "▒"),
            border_style=data.get("border_style", "round"),
        )


def parse_food_policy(value) -> FoodPolicy:
    """
    Parse a food policy name.

    Raises:
        ValueError: If the value is not the name of a known policy
    """
    choices = ", ".join(p.value for p in FoodPolicy)
    if not isinstance(value, str):
        raise ValueError(f"food_policy must be a name, got {value!r} (expected one of: {choices})")
    try:
        return FoodPolicy(value.lower())
    except ValueError:
        raise ValueError(f"Unknown food_policy '{value}' (expected one of: {choices})") from None
