"""
Abstract renderer interface for Terminal Snake.

Games draw through a Pencil onto any CanvasInterface, so the same drawing
code serves the curses host and the in-memory test canvas.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .spatial import Point


class CanvasInterface(ABC):
    """
    A grid of character cells.
    """

    @property
    @abstractmethod
    def size(self) -> Point:
        """
        Get the canvas size.

        Returns:
            Point of (columns, rows)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Blank every cell."""
        pass

    @abstractmethod
    def set_char(self, position: Point, char: str) -> None:
        """
        Write one character at an absolute cell.

        Args:
            position: Cell to write, already known to be inside the canvas
            char: A single character
        """
        pass

    def contains(self, position: Point) -> bool:
        size = self.size
        return 0 <= position.x < size.x and 0 <= position.y < size.y


@dataclass(frozen=True)
class RectCharset:
    """Characters used to outline a rectangle."""
    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    @classmethod
    def simple_lines(cls) -> "RectCharset":
        return cls("─", "─", "│", "│", "┌", "┐", "└", "┘")

    @classmethod
    def simple_round_lines(cls) -> "RectCharset":
        return cls("─", "─", "│", "│", "╭", "╮", "╰", "╯")

    @classmethod
    def ascii(cls) -> "RectCharset":
        """Plain ASCII outline for terminals without box drawing glyphs."""
        return cls("-", "-", "|", "|", "+", "+", "+", "+")


class Pencil:
    """
    Draws text, glyphs and outlines relative to a movable origin.

    Every drawing method returns the pencil so calls can be chained.
    Cells that fall outside the canvas are skipped.
    """

    def __init__(self, canvas: CanvasInterface):
        self.canvas = canvas
        self.origin = Point.zero()

    def set_origin(self, origin: Point) -> "Pencil":
        self.origin = origin
        return self

    def draw_char(self, char: str, position: Point) -> "Pencil":
        target = self.origin + position
        if self.canvas.contains(target):
            self.canvas.set_char(target, char)
        return self

    def draw_text(self, text: str, position: Point) -> "Pencil":
        for i, char in enumerate(text):
            self.draw_char(char, position + Point(i, 0))
        return self

    def draw_rect(self, charset: RectCharset, position: Point, dimension: Point) -> "Pencil":
        """
        Outline a rectangle.

        Args:
            charset: Characters for edges and corners
            position: Top-left cell, relative to the origin
            dimension: Width and height in cells, corners included
        """
        if dimension.x <= 0 or dimension.y <= 0:
            return self

        right = dimension.x - 1
        bottom = dimension.y - 1

        for x in range(1, right):
            self.draw_char(charset.top, position + Point(x, 0))
            self.draw_char(charset.bottom, position + Point(x, bottom))

        for y in range(1, bottom):
            self.draw_char(charset.left, position + Point(0, y))
            self.draw_char(charset.right, position + Point(right, y))

        self.draw_char(charset.top_left, position)
        self.draw_char(charset.top_right, position + Point(right, 0))
        self.draw_char(charset.bottom_left, position + Point(0, bottom))
        self.draw_char(charset.bottom_right, position + Point(right, bottom))
        return self
