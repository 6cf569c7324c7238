"""Shared plumbing for the CLI frontends: settings and per-file solving."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from anima.engine.gameformat import parse
from anima.engine.gameplay import GamePlay
from anima.engine.gamesolver import Solver
from anima.models.direction import Direction
from anima.models.puzzle import Board, State

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    verbose: bool = False  # print every intermediate state
    quiet: bool = False  # suppress solutions, keep timings


@dataclass
class SolveReport:
    path: Path
    initial: State
    board: Board
    moves: list[Direction] | None
    parse_seconds: float
    solve_seconds: float
    explored: int

    @property
    def solved(self) -> bool:
        return self.moves is not None

    def walk(self) -> list[State]:
        """States along the solution, starting from the initial one."""
        if self.moves is None:
            return [self.initial]
        return GamePlay(self.initial, self.board).replay(self.moves)


def solve_file(path: Path) -> SolveReport:
    """Parse and solve the puzzle stored at *path*.

    Raises ``OSError`` if the file cannot be read and ``ParseError`` if its
    contents are malformed.
    """
    text = path.read_text(encoding="utf-8")

    start = time.perf_counter()
    initial, board = parse(text)
    parse_seconds = time.perf_counter() - start
    logger.debug(
        "Parsed %s: %dx%d board, %d goals, %d actors",
        path, board.width, board.height, len(board.goals), len(initial),
    )

    start = time.perf_counter()
    result = Solver.search(initial, board)
    solve_seconds = time.perf_counter() - start
    logger.info(
        "Solved %s in %.3fs (%d states explored)", path, solve_seconds, result.explored
    )

    return SolveReport(
        path=path,
        initial=initial,
        board=board,
        moves=result.moves,
        parse_seconds=parse_seconds,
        solve_seconds=solve_seconds,
        explored=result.explored,
    )


def format_seconds(seconds: float) -> str:
    return f"{seconds:.9f}s"
