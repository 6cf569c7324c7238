"""Shared helpers: fixture loading, brute-force BFS, random small puzzles."""

from __future__ import annotations

import random
from collections import deque
from pathlib import Path

import pytest

from anima.engine.gameformat import parse
from anima.models.puzzle import Actor, Board, Color, Goal, Indeterminate, State, Tile
from anima.models.vec2 import Vec2

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def load_fixture(name: str) -> tuple[State, Board]:
    return parse((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def bfs_solution_length(initial: State, board: Board) -> int | None:
    """Length of a shortest solution by plain breadth-first search."""
    seen = {initial}
    queue: deque[tuple[State, int]] = deque([(initial, 0)])
    while queue:
        state, distance = queue.popleft()
        for _, transition in state.transitions(board):
            if not isinstance(transition, Indeterminate):
                return distance + 1
            if transition.state not in seen:
                seen.add(transition.state)
                queue.append((transition.state, distance + 1))
    return None


def reachable_states(initial: State, board: Board) -> list[State]:
    """Every state reachable from *initial* without passing a solved one."""
    seen = {initial}
    order = [initial]
    queue = deque([initial])
    while queue:
        state = queue.popleft()
        for _, transition in state.transitions(board):
            if isinstance(transition, Indeterminate) and transition.state not in seen:
                seen.add(transition.state)
                order.append(transition.state)
                queue.append(transition.state)
    return order


def random_puzzle(rng: random.Random) -> tuple[State, Board]:
    """A small random board with 1-2 goals and 1-3 actors on passable cells."""
    width = rng.randint(3, 4)
    height = rng.randint(3, 4)
    tiles = tuple(
        Tile.PASSABLE if rng.random() < 0.8 else Tile.IMPASSABLE
        for _ in range(width * height)
    )
    passable = [
        Vec2(x, y)
        for y in range(height)
        for x in range(width)
        if tiles[x + y * width] is Tile.PASSABLE
    ]
    if len(passable) < 2:
        tiles = (Tile.PASSABLE,) * (width * height)
        passable = [Vec2(x, y) for y in range(height) for x in range(width)]

    goal_cells = rng.sample(passable, rng.randint(1, 2))
    goals = tuple(Goal(p, rng.choice(list(Color))) for p in goal_cells)
    actor_cells = rng.sample(passable, rng.randint(1, min(3, len(passable))))
    actors = tuple(Actor(p, rng.choice(list(Color))) for p in actor_cells)

    board = Board(size=Vec2(width, height), tiles=tiles, goals=goals)
    return State(actors), board


@pytest.fixture
def open_board() -> Board:
    """A 5×5 board with every cell passable and no goals."""
    return Board(size=Vec2(5, 5), tiles=(Tile.PASSABLE,) * 25)
