from anima.models.direction import Direction
from anima.models.puzzle import (
    MAX_ACTORS,
    UNREACHABLE,
    Actor,
    Board,
    Color,
    Goal,
    Indeterminate,
    State,
    Success,
    Tile,
    Transition,
)
from anima.models.vec2 import Vec2

__all__ = [
    "MAX_ACTORS",
    "UNREACHABLE",
    "Actor",
    "Board",
    "Color",
    "Direction",
    "Goal",
    "Indeterminate",
    "State",
    "Success",
    "Tile",
    "Transition",
    "Vec2",
]
