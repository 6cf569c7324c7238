"""Reads puzzle definitions from text.

A definition is a rectangular block of rows (top row first) followed by a
blank line and then one actor per line::

     ....
    .r.r.
    .. ..
    .r.r.
    ....

    R 2 1
    R 1 2

Row characters: ``.`` passable, space impassable, ``r``/``b`` a passable goal
cell of that color.  Actor lines are ``<R|B> <x> <y>`` with the origin at the
bottom-left cell.
"""

from __future__ import annotations

from anima.models.puzzle import MAX_ACTORS, Actor, Board, Color, Goal, State, Tile
from anima.models.vec2 import Vec2

_ROW_CHARS: dict[str, tuple[Tile, Color | None]] = {
    ".": (Tile.PASSABLE, None),
    " ": (Tile.IMPASSABLE, None),
    "r": (Tile.PASSABLE, Color.RED),
    "b": (Tile.PASSABLE, Color.BLUE),
}


# -- errors -------------------------------------------------------------------


class ParseError(ValueError):
    """Base class for malformed puzzle text.

    ``line_number`` is 1-based, or ``None`` when the error is not tied to a line.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class NoRowsError(ParseError):
    def __init__(self) -> None:
        super().__init__("puzzle text is empty")


class NoLineBreakAfterRowsError(ParseError):
    def __init__(self) -> None:
        super().__init__("expected a blank line after the board rows")


class UnevenRowsError(ParseError):
    def __init__(self, line_number: int, data_width: int, line_width: int) -> None:
        super().__init__(
            f"row is {line_width} wide, expected {data_width}", line_number
        )
        self.data_width = data_width
        self.line_width = line_width


class UnexpectedCharacterError(ParseError):
    def __init__(self, line_number: int, column_number: int, character: str) -> None:
        super().__init__(
            f"unexpected character {character!r} in column {column_number}",
            line_number,
        )
        self.column_number = column_number
        self.character = character


class EmptyActorDefinitionError(ParseError):
    def __init__(self, line_number: int) -> None:
        super().__init__("empty actor definition", line_number)


class InvalidActorColorError(ParseError):
    def __init__(self, line_number: int, color: str) -> None:
        super().__init__(f"invalid actor color {color!r}", line_number)
        self.color = color


class MissingActorXError(ParseError):
    def __init__(self, line_number: int) -> None:
        super().__init__("actor is missing its x coordinate", line_number)


class MissingActorYError(ParseError):
    def __init__(self, line_number: int) -> None:
        super().__init__("actor is missing its y coordinate", line_number)


class InvalidActorXError(ParseError):
    def __init__(self, line_number: int, value: str) -> None:
        super().__init__(f"invalid actor x coordinate {value!r}", line_number)
        self.value = value


class InvalidActorYError(ParseError):
    def __init__(self, line_number: int, value: str) -> None:
        super().__init__(f"invalid actor y coordinate {value!r}", line_number)
        self.value = value


class TooManyActorsError(ParseError):
    def __init__(self, line_number: int, limit: int) -> None:
        super().__init__(f"more than {limit} actors", line_number)
        self.limit = limit


class ActorOnImpassableTileError(ParseError):
    def __init__(self, line_number: int, position: Vec2) -> None:
        super().__init__(
            f"actor at ({position.x}, {position.y}) is not on a passable tile",
            line_number,
        )
        self.position = position


class OverlappingActorsError(ParseError):
    def __init__(self, line_number: int, position: Vec2) -> None:
        super().__init__(
            f"actor at ({position.x}, {position.y}) overlaps another actor",
            line_number,
        )
        self.position = position


# -- parsing ------------------------------------------------------------------


def parse(text: str, max_actors: int = MAX_ACTORS) -> tuple[State, Board]:
    """Parse *text* into the initial state and the board.

    Raises a ``ParseError`` subclass describing the first problem found.
    """
    lines = text.splitlines()
    if not lines:
        raise NoRowsError()

    width = len(lines[0])
    try:
        height = lines.index("")
    except ValueError:
        raise NoLineBreakAfterRowsError() from None

    board = _parse_rows(lines[:height], width)
    actors = _parse_actors(lines[height + 1 :], height + 2, board, max_actors)
    return State(tuple(actors)), board


def _parse_rows(rows: list[str], width: int) -> Board:
    height = len(rows)
    tiles = [Tile.IMPASSABLE] * (width * height)
    goals: list[Goal] = []

    for row_index, line in enumerate(rows):
        line_number = row_index + 1
        y = height - 1 - row_index
        if len(line) != width:
            raise UnevenRowsError(line_number, width, len(line))
        for x, char in enumerate(line):
            try:
                tile, goal_color = _ROW_CHARS[char]
            except KeyError:
                raise UnexpectedCharacterError(line_number, x + 1, char) from None
            tiles[x + y * width] = tile
            if goal_color is not None:
                goals.append(Goal(Vec2(x, y), goal_color))

    return Board(size=Vec2(width, height), tiles=tuple(tiles), goals=tuple(goals))


def _parse_actors(
    lines: list[str], first_line_number: int, board: Board, max_actors: int
) -> list[Actor]:
    # Blank lines at the very end of the file are not actor definitions.
    while lines and not lines[-1].strip():
        lines = lines[:-1]

    actors: list[Actor] = []
    occupied: set[Vec2] = set()

    for offset, line in enumerate(lines):
        line_number = first_line_number + offset
        pieces = line.split()
        if not pieces:
            raise EmptyActorDefinitionError(line_number)

        try:
            color = Color(pieces[0])
        except ValueError:
            raise InvalidActorColorError(line_number, pieces[0]) from None

        if len(pieces) < 2:
            raise MissingActorXError(line_number)
        try:
            x = int(pieces[1])
        except ValueError:
            raise InvalidActorXError(line_number, pieces[1]) from None

        if len(pieces) < 3:
            raise MissingActorYError(line_number)
        try:
            y = int(pieces[2])
        except ValueError:
            raise InvalidActorYError(line_number, pieces[2]) from None

        if len(actors) >= max_actors:
            raise TooManyActorsError(line_number, max_actors)

        position = Vec2(x, y)
        if board.tile(position) is not Tile.PASSABLE:
            raise ActorOnImpassableTileError(line_number, position)
        if position in occupied:
            raise OverlappingActorsError(line_number, position)

        occupied.add(position)
        actors.append(Actor(position, color))

    return actors
