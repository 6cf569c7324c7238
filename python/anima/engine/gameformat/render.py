"""Turns a state back into text, for display or for saving."""

from __future__ import annotations

from anima.models.puzzle import Board, State
from anima.models.vec2 import Vec2


def _board_char(board: Board, position: Vec2) -> str:
    goal = board.goal_at(position)
    if goal is not None:
        return goal.color.goal_letter
    return board.tile(position).value


def render(state: State, board: Board) -> str:
    """Draw the board top row first, with actors drawn over goals.

    Passable cells are ``.``, impassable cells are spaces, goals are
    ``r``/``b`` and actors ``R``/``B``.
    """
    rows: list[str] = []
    for y in reversed(range(board.height)):
        row: list[str] = []
        for x in range(board.width):
            position = Vec2(x, y)
            actor = state.actor_at(position)
            row.append(actor.color.value if actor else _board_char(board, position))
        rows.append("".join(row))
    return "\n".join(rows)


def dump(state: State, board: Board) -> str:
    """Write *state* and *board* in the format ``parse`` reads."""
    rows = [
        "".join(_board_char(board, Vec2(x, y)) for x in range(board.width))
        for y in reversed(range(board.height))
    ]
    actors = [
        f"{actor.color.value} {actor.position.x} {actor.position.y}"
        for actor in state.actors
    ]
    return "\n".join([*rows, "", *actors]) + "\n"

