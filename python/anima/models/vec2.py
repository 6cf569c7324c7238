"""Integer 2-D vector used for positions and unit offsets."""

from __future__ import annotations

from typing import NamedTuple


class Vec2(NamedTuple):
    """Immutable and ordered by (x, y); hashes as a plain tuple."""

    x: int
    y: int

    # -- constructors ---------------------------------------------------------

    @classmethod
    def right(cls) -> Vec2:
        return cls(1, 0)

    @classmethod
    def up(cls) -> Vec2:
        return cls(0, 1)

    @classmethod
    def left(cls) -> Vec2:
        return cls(-1, 0)

    @classmethod
    def down(cls) -> Vec2:
        return cls(0, -1)

    @classmethod
    def zero(cls) -> Vec2:
        return cls(0, 0)

    # -- arithmetic -----------------------------------------------------------

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: int) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def abs(self) -> Vec2:
        """Component-wise absolute value."""
        return Vec2(abs(self.x), abs(self.y))

    def manhattan(self) -> int:
        return abs(self.x) + abs(self.y)
