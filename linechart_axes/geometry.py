from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A cell coordinate on the canvas. X grows right, Y grows down."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """Half-open cell rectangle, [x0, x1) by [y0, y1)."""

    x0: int
    y0: int
    x1: int
    y1: int

    def __post_init__(self) -> None:
        if self.x1 < self.x0 or self.y1 < self.y0:
            raise ValueError(f"invalid rect ({self.x0},{self.y0})-({self.x1},{self.y1})")

    @classmethod
    def from_size(cls, width: int, height: int) -> "Rect":
        return cls(0, 0, width, height)

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    def contains(self, point: Point) -> bool:
        return self.x0 <= point.x < self.x1 and self.y0 <= point.y < self.y1


def align_right(area: Rect, text: str) -> Point:
    """Returns where a single line of text starts when right-aligned in area.

    Text longer than the area starts at its left edge, the caller trims it on
    draw.
    """
    if "\n" in text:
        raise ValueError("align_right supports a single line of text only")
    text_len = min(len(text), area.width)
    return Point(area.x1 - text_len, area.y0 + (area.height - 1) // 2)
