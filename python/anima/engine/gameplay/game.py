"""Replays commands against a puzzle and tracks the win condition."""

from __future__ import annotations

from typing import Iterable

from anima.models.direction import Direction
from anima.models.puzzle import Board, State


class GamePlay:
    """Orchestrates a single replay session over a fixed board."""

    def __init__(self, state: State, board: Board) -> None:
        self.board = board
        self.state = state
        self.moves: int = 0

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Apply *direction* to every actor.

        The command always counts as a move; returns True if any actor
        actually changed position.
        """
        after = self.state.transition(self.board, direction)
        changed = after != self.state
        self.state = after
        self.moves += 1
        return changed

    def replay(self, directions: Iterable[Direction]) -> list[State]:
        """Apply *directions* in order and return every state visited.

        The returned list starts with the state before the first command.
        """
        states = [self.state]
        for direction in directions:
            self.move(direction)
            states.append(self.state)
        return states

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved_by(self.state)
