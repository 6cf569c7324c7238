"""Puzzle model: the static board and the actor state that moves on it.

Coordinates are ``(x, y)`` with the origin at the bottom-left cell.  Every
command moves all actors at once; red actors follow the command and blue
actors move the opposite way.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Iterable, NamedTuple

from anima.models.direction import Direction
from anima.models.vec2 import Vec2

# Largest actor count the parser accepts unless told otherwise.
MAX_ACTORS = 8

# Heuristic value for a goal whose color has no actor on the board.
UNREACHABLE = sys.maxsize


class Color(StrEnum):
    RED = "R"
    BLUE = "B"

    @property
    def goal_letter(self) -> str:
        return self.value.lower()

    def step(self, direction: Direction) -> Vec2:
        """Offset an actor of this color takes for *direction*."""
        if self is Color.BLUE:
            return direction.reverse().to_vec2()
        return direction.to_vec2()


class Tile(Enum):
    PASSABLE = "."
    IMPASSABLE = " "


@dataclass(frozen=True)
class Goal:
    position: Vec2
    color: Color


class Actor(NamedTuple):
    position: Vec2
    color: Color


@dataclass(frozen=True)
class Board:
    """Immutable grid of tiles plus the goals that must be covered.

    ``tiles`` is row-major from the bottom row: the tile at ``(x, y)`` lives
    at index ``x + y * width``.
    """

    size: Vec2
    tiles: tuple[Tile, ...]
    goals: tuple[Goal, ...] = ()
    _goal_actors: frozenset[Actor] = field(
        default=frozenset(), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.size.x < 0 or self.size.y < 0:
            raise ValueError(f"Board size must be non-negative, got {self.size}.")
        if len(self.tiles) != self.size.x * self.size.y:
            raise ValueError(
                f"Expected {self.size.x * self.size.y} tiles for a "
                f"{self.size.x}×{self.size.y} board, got {len(self.tiles)}."
            )
        object.__setattr__(self, "tiles", tuple(self.tiles))
        object.__setattr__(self, "goals", tuple(self.goals))
        object.__setattr__(
            self, "_goal_actors", frozenset(Actor(g.position, g.color) for g in self.goals)
        )

    @property
    def width(self) -> int:
        return self.size.x

    @property
    def height(self) -> int:
        return self.size.y

    # -- queries --------------------------------------------------------------

    def in_bounds(self, position: Vec2) -> bool:
        return 0 <= position.x < self.size.x and 0 <= position.y < self.size.y

    def tile(self, position: Vec2) -> Tile:
        """Return the tile at *position*; anything off the grid is impassable."""
        x, y = position
        width, height = self.size
        if 0 <= x < width and 0 <= y < height:
            return self.tiles[x + y * width]
        return Tile.IMPASSABLE

    def goal_at(self, position: Vec2) -> Goal | None:
        for goal in self.goals:
            if goal.position == position:
                return goal
        return None

    def is_solved_by(self, state: State) -> bool:
        """Check that every goal is covered by an actor of its color."""
        return self._goal_actors.issubset(state.actors)


@dataclass(frozen=True)
class Success:
    """The command led to a configuration that satisfies every goal."""


@dataclass(frozen=True)
class Indeterminate:
    """The command led to *state*, which still has uncovered goals."""

    state: State


Transition = Success | Indeterminate


@dataclass(frozen=True, eq=False)
class State:
    """Snapshot of every actor on the board.

    Actors are kept sorted by ``(position, color)`` so two physically equal
    configurations compare and hash the same whatever order they were built in.
    """

    actors: tuple[Actor, ...]
    _hash: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        actors = tuple(sorted(self.actors))
        object.__setattr__(self, "actors", actors)
        object.__setattr__(self, "_hash", hash(actors))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._hash == other._hash and self.actors == other.actors

    @classmethod
    def of(cls, actors: Iterable[Actor]) -> State:
        return cls(tuple(actors))

    def __len__(self) -> int:
        return len(self.actors)

    def actor_at(self, position: Vec2) -> Actor | None:
        for actor in self.actors:
            if actor.position == position:
                return actor
        return None

    # -- moves ----------------------------------------------------------------

    def transition(self, board: Board, direction: Direction) -> State:
        """Apply one command to every actor and return the resulting state.

        An actor steps only onto a passable tile.  When two actors end up on
        the same cell both go back to where they started, and the check is
        repeated until a full pass finds no collision.
        """
        steps = {color: color.step(direction) for color in Color}
        before = [actor.position for actor in self.actors]
        after: list[Vec2] = []
        for position, color in self.actors:
            candidate = position + steps[color]
            if board.tile(candidate) is Tile.PASSABLE:
                after.append(candidate)
            else:
                after.append(position)

        done = len(set(after)) == len(after)
        while not done:
            done = True
            for i in range(len(after)):
                for j in range(i + 1, len(after)):
                    if after[i] != after[j]:
                        continue
                    if after[i] == before[i] and after[j] == before[j]:
                        # Overlapping start positions; reverting changes nothing.
                        continue
                    after[i] = before[i]
                    after[j] = before[j]
                    done = False

        return State(
            tuple(Actor(pos, actor.color) for pos, actor in zip(after, self.actors))
        )

    def transitions(self, board: Board) -> list[tuple[Direction, Transition]]:
        """Apply each command in turn (Right, Up, Left, Down)."""
        result: list[tuple[Direction, Transition]] = []
        for direction in Direction:
            state = self.transition(board, direction)
            if board.is_solved_by(state):
                result.append((direction, Success()))
            else:
                result.append((direction, Indeterminate(state)))
        return result

    def heuristic(self, board: Board) -> int:
        """Lower bound on the commands still needed.

        For each goal take the Manhattan distance to the nearest actor of its
        color; the estimate is the largest of those.  A goal whose color has no
        actor yields ``UNREACHABLE``.
        """
        estimate = 0
        for goal in board.goals:
            gx, gy = goal.position
            nearest = min(
                (
                    abs(gx - x) + abs(gy - y)
                    for (x, y), actor_color in self.actors
                    if actor_color is goal.color
                ),
                default=UNREACHABLE,
            )
            estimate = max(estimate, nearest)
        return estimate
