"""Vanilla terminal frontend — no third-party dependencies.

Uses only ``print`` and ANSI codes to report each puzzle's timings and
solution.
"""

from __future__ import annotations

import sys
from pathlib import Path

from anima.engine.gameformat import ParseError, render
from anima.frontend.cli.session import Settings, SolveReport, format_seconds, solve_file
from anima.models.direction import Direction


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- report rendering ---------------------------------------------------------


def _print_walk(report: SolveReport, moves: list[Direction]) -> None:
    """Print every state along the solution with the command between them."""
    states = report.walk()
    for state, direction in zip(states, moves):
        print(render(state, report.board))
        print(f"{_C}{direction.label}{_R}")
    print(render(states[-1], report.board))


def _print_report(report: SolveReport, settings: Settings) -> None:
    print(f"{report.path}:")
    print(f"{_DIM}Parse:{_R} {format_seconds(report.parse_seconds)}")
    print(f"{_DIM}Solve:{_R} {format_seconds(report.solve_seconds)}")

    if settings.quiet:
        return

    if report.moves is None:
        print(f"{_Y}No solution{_R}")
        return

    print(f"{_G}Found solution of length {len(report.moves)}:{_R}")
    if settings.verbose:
        _print_walk(report, report.moves)
    else:
        print(", ".join(d.label for d in report.moves))


# -- public entry point -------------------------------------------------------


def run(paths: list[Path], settings: Settings) -> int:
    """Solve each file in *paths*; return 1 if any of them failed."""
    status = 0
    for path in paths:
        try:
            report = solve_file(path)
        except (OSError, ParseError) as e:
            print(f"{_RED}Error while solving '{path}':{_R}\n{e}", file=sys.stderr)
            status = 1
            continue
        _print_report(report, settings)
    return status
