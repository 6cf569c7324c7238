"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
solving session as the vanilla CLI.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from anima.engine.gameformat import ParseError
from anima.frontend.cli.session import Settings, SolveReport, format_seconds, solve_file
from anima.models.direction import Direction
from anima.models.puzzle import Board, Color, State, Tile
from anima.models.vec2 import Vec2

console = Console()

_ACTOR_STYLE = {Color.RED: "bold red", Color.BLUE: "bold blue"}
_GOAL_STYLE = {Color.RED: "red", Color.BLUE: "blue"}


# -- board rendering ----------------------------------------------------------


def _cell(state: State, board: Board, position: Vec2) -> str:
    actor = state.actor_at(position)
    goal = board.goal_at(position)
    if actor is not None:
        glyph = actor.color.value
        if goal is not None and goal.color is actor.color:
            return f"[{_ACTOR_STYLE[actor.color]} reverse]{glyph}[/]"
        return f"[{_ACTOR_STYLE[actor.color]}]{glyph}[/]"
    if goal is not None:
        return f"[{_GOAL_STYLE[goal.color]}]{goal.color.goal_letter}[/]"
    if board.tile(position) is Tile.PASSABLE:
        return "[dim]·[/dim]"
    return ""


def _render_board(state: State, board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid (top row first)."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=1, justify="center")

    for y in reversed(range(board.height)):
        table.add_row(*(_cell(state, board, Vec2(x, y)) for x in range(board.width)))

    return table


# -- report screens -----------------------------------------------------------


def _timings(report: SolveReport) -> Text:
    stats = Text()
    stats.append("Parse: ", style="dim")
    stats.append(format_seconds(report.parse_seconds), style="bold yellow")
    stats.append("    Solve: ", style="dim")
    stats.append(format_seconds(report.solve_seconds), style="bold yellow")
    stats.append("    Explored: ", style="dim")
    stats.append(str(report.explored), style="bold yellow")
    return stats


def _walk(report: SolveReport, moves: list[Direction]) -> Group:
    states = report.walk()
    parts: list = []
    for state, direction in zip(states, moves):
        parts.append(Align.center(_render_board(state, report.board)))
        parts.append(Align.center(Text(direction.label, style="bold cyan")))
    parts.append(Align.center(_render_board(states[-1], report.board)))
    return Group(*parts)


def _draw_report(report: SolveReport, settings: Settings) -> None:
    parts: list = [Align.center(_timings(report))]

    if not settings.quiet:
        if report.moves is None:
            parts.append(Align.center(Text("No solution", style="bold yellow")))
        else:
            parts.append(
                Align.center(
                    Text(
                        f"Found solution of length {len(report.moves)}:",
                        style="bold green",
                    )
                )
            )
            if settings.verbose:
                parts.append(_walk(report, report.moves))
            else:
                parts.append(Align.center(_render_board(report.initial, report.board)))
                parts.append(
                    Align.center(Text(", ".join(d.label for d in report.moves)))
                )

    border = "green" if report.solved else "yellow"
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{report.path}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )
    console.print(panel)


# -- public entry point -------------------------------------------------------


def run(paths: list[Path], settings: Settings) -> int:
    """Solve each file in *paths*; return 1 if any of them failed."""
    status = 0
    for path in paths:
        try:
            report = solve_file(path)
        except (OSError, ParseError) as e:
            console.print(
                Panel(
                    Text(str(e)),
                    title=f"[bold red]Error while solving '{path}'[/bold red]",
                    border_style="red",
                )
            )
            status = 1
            continue
        _draw_report(report, settings)
    return status
