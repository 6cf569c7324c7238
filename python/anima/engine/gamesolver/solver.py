"""Shortest-solution search (A*) over puzzle states."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass

from anima.models.direction import Direction
from anima.models.puzzle import Board, State, Success

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search.

    ``moves`` is ``None`` when no command sequence solves the puzzle.
    ``explored`` counts expanded states, ``discovered`` counts trail entries.
    """

    moves: list[Direction] | None
    explored: int
    discovered: int

    @property
    def solved(self) -> bool:
        return self.moves is not None


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(initial: State, board: Board) -> list[Direction] | None:
        """Return a shortest command sequence for *initial*, or ``None``."""
        return Solver.search(initial, board).moves

    @staticmethod
    def hint(initial: State, board: Board) -> Direction | None:
        """Return the first command of a shortest solution, or ``None``."""
        moves = Solver.solve(initial, board)
        return moves[0] if moves else None

    @staticmethod
    def search(initial: State, board: Board) -> SearchResult:
        """Run A* from *initial* and report the path with search counters.

        Every command costs 1 and ``State.heuristic`` never overestimates, so
        the first ``Success`` found is reached by a shortest sequence.

        The parent trail holds one ``(parent_index, direction)`` pair per
        discovered state; index 0 stands for *initial*, so entry ``i`` lives at
        ``parents[i - 1]``.  A state may be pushed several times before it is
        expanded; the stale copies are dropped when popped.
        """
        visited: set[State] = {initial}
        parents: list[tuple[int, Direction]] = []
        # (estimate, insertion order, distance, trail index, state)
        frontier: list[tuple[int, int, int, int, State]] = []
        counter = itertools.count()

        for direction, transition in initial.transitions(board):
            if isinstance(transition, Success):
                return Solver._finish([direction], visited, parents)
            state = transition.state
            parents.append((0, direction))
            heapq.heappush(
                frontier,
                (state.heuristic(board) + 1, next(counter), 1, len(parents), state),
            )

        while frontier:
            _, _, distance, index, current = heapq.heappop(frontier)
            if current in visited:
                continue
            visited.add(current)

            for direction, transition in current.transitions(board):
                if isinstance(transition, Success):
                    moves = Solver._reconstruct(parents, index)
                    moves.append(direction)
                    return Solver._finish(moves, visited, parents)
                state = transition.state
                parents.append((index, direction))
                heapq.heappush(
                    frontier,
                    (
                        state.heuristic(board) + distance + 1,
                        next(counter),
                        distance + 1,
                        len(parents),
                        state,
                    ),
                )

        logger.debug(
            "No solution: explored %d states, discovered %d",
            len(visited), len(parents),
        )
        return SearchResult(moves=None, explored=len(visited), discovered=len(parents))

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(
        parents: list[tuple[int, Direction]], index: int
    ) -> list[Direction]:
        """Walk the trail back from *index* to the initial state."""
        moves: list[Direction] = []
        while index != 0:
            index, direction = parents[index - 1]
            moves.append(direction)
        moves.reverse()
        return moves

    @staticmethod
    def _finish(
        moves: list[Direction],
        visited: set[State],
        parents: list[tuple[int, Direction]],
    ) -> SearchResult:
        logger.debug(
            "Solution of length %d: explored %d states, discovered %d",
            len(moves), len(visited), len(parents),
        )
        return SearchResult(moves=moves, explored=len(visited), discovered=len(parents))
