"""The four commands, in the fixed order the solver tries them."""

from __future__ import annotations

from enum import StrEnum

from anima.models.vec2 import Vec2


class Direction(StrEnum):
    RIGHT = "right"
    UP = "up"
    LEFT = "left"
    DOWN = "down"

    def rotate_ccw(self) -> Direction:
        return _CCW[self]

    def rotate_cw(self) -> Direction:
        return _CW[self]

    def reverse(self) -> Direction:
        return _REVERSE[self]

    def to_vec2(self) -> Vec2:
        return _VECTORS[self]

    @property
    def label(self) -> str:
        """Display name, e.g. ``Right``."""
        return self.value.capitalize()

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Look up a direction by its lower-case name.

        Raises ``ValueError`` for anything else.
        """
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unknown direction {text!r}.") from None


_CCW = {
    Direction.RIGHT: Direction.UP,
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
}
_CW = {after: before for before, after in _CCW.items()}
_REVERSE = {d: _CCW[_CCW[d]] for d in Direction}
_VECTORS = {
    Direction.RIGHT: Vec2.right(),
    Direction.UP: Vec2.up(),
    Direction.LEFT: Vec2.left(),
    Direction.DOWN: Vec2.down(),
}
