"""Move resolution, goal checks, and the distance heuristic."""

from __future__ import annotations

import itertools

import pytest

from anima.models.direction import Direction
from anima.models.puzzle import (
    UNREACHABLE,
    Actor,
    Board,
    Color,
    Goal,
    Indeterminate,
    State,
    Success,
    Tile,
)
from anima.models.vec2 import Vec2

R = Color.RED
B = Color.BLUE


def _actors(state: State) -> set[tuple[int, int, Color]]:
    return {(a.position.x, a.position.y, a.color) for a in state.actors}


def _state(*actors: tuple[int, int, Color]) -> State:
    return State(tuple(Actor(Vec2(x, y), c) for x, y, c in actors))


# -- board --------------------------------------------------------------------


def test_tile_outside_grid_is_impassable(open_board: Board) -> None:
    assert open_board.tile(Vec2(0, 0)) is Tile.PASSABLE
    assert open_board.tile(Vec2(4, 4)) is Tile.PASSABLE
    for outside in (Vec2(-1, 0), Vec2(0, -1), Vec2(5, 0), Vec2(0, 5)):
        assert open_board.tile(outside) is Tile.IMPASSABLE


def test_board_rejects_wrong_tile_count() -> None:
    with pytest.raises(ValueError):
        Board(size=Vec2(2, 2), tiles=(Tile.PASSABLE,) * 3)


def test_is_solved_by_needs_matching_color() -> None:
    board = Board(
        size=Vec2(2, 1),
        tiles=(Tile.PASSABLE, Tile.PASSABLE),
        goals=(Goal(Vec2(0, 0), R),),
    )
    assert board.is_solved_by(_state((0, 0, R)))
    assert not board.is_solved_by(_state((0, 0, B)))
    assert not board.is_solved_by(_state((1, 0, R)))


# -- canonical order ----------------------------------------------------------


def test_permuted_actor_lists_are_equal_states() -> None:
    actors = [(2, 1, R), (1, 2, B), (3, 2, R), (0, 0, B)]
    states = [_state(*perm) for perm in itertools.permutations(actors)]
    assert len(set(states)) == 1
    assert all(hash(s) == hash(states[0]) for s in states)


def test_canonicalising_twice_is_a_no_op() -> None:
    state = _state((3, 3, R), (0, 1, B), (0, 1, R))
    assert State(state.actors) == state
    assert State(state.actors).actors == state.actors


def test_state_hash_matches_its_sorted_actors() -> None:
    state = _state((3, 3, R), (0, 1, B))
    assert hash(state) == hash(state.actors)
    assert state != _state((3, 3, B), (0, 1, B))
    assert state != state.actors
    assert "_hash" not in repr(state)


# -- transition ---------------------------------------------------------------


def test_red_follows_and_blue_opposes_command(open_board: Board) -> None:
    state = _state((2, 2, R), (0, 0, B))
    after = state.transition(open_board, Direction.LEFT)
    assert _actors(after) == {(1, 2, R), (1, 0, B)}


def test_transition_is_deterministic(open_board: Board) -> None:
    state = _state((1, 1, R), (3, 3, B), (2, 4, R))
    for direction in Direction:
        results = {state.transition(open_board, direction) for _ in range(5)}
        assert len(results) == 1


def test_actor_does_not_leave_the_grid(open_board: Board) -> None:
    state = _state((4, 2, R))
    assert state.transition(open_board, Direction.RIGHT) == state


def test_actor_does_not_enter_impassable_tile() -> None:
    #  . .
    tiles = (Tile.PASSABLE, Tile.IMPASSABLE, Tile.PASSABLE)
    board = Board(size=Vec2(3, 1), tiles=tiles)
    state = _state((0, 0, R))
    assert state.transition(board, Direction.RIGHT) == state
    assert state.transition(board, Direction.LEFT) == state


def test_head_on_collision_reverts_both_actors(open_board: Board) -> None:
    # Red at (1,2) moves right onto (2,2); blue at (3,2) moves left onto (2,2).
    state = _state((1, 2, R), (3, 2, B))
    after = state.transition(open_board, Direction.RIGHT)
    assert after == state


def test_collision_cascades_to_fixpoint() -> None:
    # red@1 and blue@3 both aim at x=2 and revert; red@0 then sits on
    # red@1 at x=1 and has to revert as well.
    board = Board(size=Vec2(4, 1), tiles=(Tile.PASSABLE,) * 4)
    state = _state((0, 0, R), (1, 0, R), (3, 0, B))
    after = state.transition(board, Direction.RIGHT)
    assert after == state


def test_blocked_actor_stops_follower(open_board: Board) -> None:
    # The leading actor is stuck at the wall, the follower bumps into it.
    state = _state((3, 0, R), (4, 0, R))
    after = state.transition(open_board, Direction.RIGHT)
    assert after == state


def test_actors_may_follow_into_vacated_cells(open_board: Board) -> None:
    state = _state((1, 0, R), (2, 0, R))
    after = state.transition(open_board, Direction.RIGHT)
    assert _actors(after) == {(2, 0, R), (3, 0, R)}


def test_transitions_tag_success() -> None:
    board = Board(
        size=Vec2(3, 1),
        tiles=(Tile.PASSABLE,) * 3,
        goals=(Goal(Vec2(2, 0), R),),
    )
    state = _state((1, 0, R))
    outcomes = state.transitions(board)
    assert [d for d, _ in outcomes] == list(Direction)
    assert outcomes[0][1] == Success()
    assert isinstance(outcomes[2][1], Indeterminate)
    assert _actors(outcomes[2][1].state) == {(0, 0, R)}


# -- heuristic ----------------------------------------------------------------


def test_heuristic_is_max_of_nearest_distances() -> None:
    board = Board(
        size=Vec2(5, 5),
        tiles=(Tile.PASSABLE,) * 25,
        goals=(Goal(Vec2(0, 0), R), Goal(Vec2(4, 4), R), Goal(Vec2(2, 2), B)),
    )
    state = _state((0, 1, R), (4, 2, R), (2, 2, B))
    # nearest red to (0,0) is 1 away, to (4,4) is 2 away, blue is on its goal
    assert state.heuristic(board) == 2


def test_heuristic_without_goals_is_zero(open_board: Board) -> None:
    assert _state((1, 1, R)).heuristic(open_board) == 0


def test_heuristic_for_missing_color_is_unreachable() -> None:
    board = Board(
        size=Vec2(2, 1),
        tiles=(Tile.PASSABLE,) * 2,
        goals=(Goal(Vec2(0, 0), B),),
    )
    assert _state((1, 0, R)).heuristic(board) == UNREACHABLE
