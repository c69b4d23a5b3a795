from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List

from .errors import InvalidBlockError, InvalidPositionError, InvalidRectangleError, InvalidScoreError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __post_init__(self) -> None:
        if not (_is_int(self.x) and _is_int(self.y)):
            raise InvalidPositionError(f"Position coordinates must be integers: ({self.x!r}, {self.y!r})")
        if self.x < 0 or self.y < 0:
            raise InvalidPositionError(f"Position coordinates must be non-negative: ({self.x}, {self.y})")

    def add(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def is_valid(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def __str__(self) -> str:
        return f"Position({self.x}, {self.y})"


class Color(IntEnum):
    # 0 is reserved for empty cells in the field array
    BLUE = 1
    RED = 2
    YELLOW = 3

    @property
    def tag(self) -> str:
        return self.name.lower()

    @property
    def hex_code(self) -> str:
        return _HEX_CODES[self]

    @classmethod
    def from_tag(cls, tag: str) -> "Color":
        try:
            return cls[tag.upper()]
        except KeyError:
            raise ValueError(f"Unknown color tag: {tag!r}") from None

    def __str__(self) -> str:
        return self.tag


_HEX_CODES = {
    Color.BLUE: "#3498db",
    Color.RED: "#e74c3c",
    Color.YELLOW: "#f1c40f",
}


@dataclass(frozen=True)
class Block:
    color: Color

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise InvalidBlockError(f"Block color must be a Color, got {self.color!r}")

    def is_same_color(self, other: "Block") -> bool:
        return self.color == other.color

    def __str__(self) -> str:
        return f"Block({self.color})"


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned region of the field, anchored at its top-left cell."""

    top_left: Position
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidRectangleError("Rectangle width and height must be positive")

    @property
    def bottom_right(self) -> Position:
        return Position(self.top_left.x + self.width - 1, self.top_left.y + self.height - 1)

    def contains(self, position: Position) -> bool:
        return (
            self.top_left.x <= position.x < self.top_left.x + self.width
            and self.top_left.y <= position.y < self.top_left.y + self.height
        )

    def positions(self) -> List[Position]:
        return [
            Position(x, y)
            for y in range(self.top_left.y, self.top_left.y + self.height)
            for x in range(self.top_left.x, self.top_left.x + self.width)
        ]

    def area(self) -> int:
        return self.width * self.height

    def is_within(self, other: "Rectangle") -> bool:
        """True when every cell of this rectangle is also a cell of `other`."""
        return other.contains(self.top_left) and other.contains(self.bottom_right)

    def __str__(self) -> str:
        return f"Rectangle(top_left={self.top_left}, width={self.width}, height={self.height})"


@dataclass(frozen=True)
class Score:
    value: int = 0

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value < 0:
            raise InvalidScoreError(f"Score must be a non-negative integer, got {self.value!r}")

    @classmethod
    def zero(cls) -> "Score":
        return cls(0)

    def add(self, points: int) -> "Score":
        if not _is_int(points) or points < 0:
            raise InvalidScoreError(f"Points must be a non-negative integer, got {points!r}")
        return Score(self.value + points)

    def __str__(self) -> str:
        return f"Score({self.value})"
