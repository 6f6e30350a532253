"""
In-memory character canvas.
"""
from typing import List

from ..core.renderer_interface import CanvasInterface
from ..core.spatial import Point


class CharCanvas(CanvasInterface):
    """A fixed-size grid of characters, blank is a space."""

    def __init__(self, size: Point):
        self._size = size
        self._rows: List[List[str]] = []
        self.clear()

    @property
    def size(self) -> Point:
        return self._size

    def clear(self) -> None:
        self._rows = [[" "] * self._size.x for _ in range(self._size.y)]

    def set_char(self, position: Point, char: str) -> None:
        self._rows[position.y][position.x] = char

    def get_char(self, position: Point) -> str:
        return self._rows[position.y][position.x]

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._rows]

    def find(self, char: str) -> List[Point]:
        """Every cell holding char, row by row."""
        return [
            Point(x, y)
            for y, row in enumerate(self._rows)
            for x, cell in enumerate(row)
            if cell == char
        ]
