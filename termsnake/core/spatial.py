"""
Grid coordinates shared by games and hosts.
"""
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Point:
    """A point on the character grid."""
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def __floordiv__(self, divisor: int) -> "Point":
        return Point(self.x // divisor, self.y // divisor)

    @classmethod
    def zero(cls) -> "Point":
        return cls(0, 0)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}
