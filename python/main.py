#!/usr/bin/env python3
"""Anima puzzle solver.

Usage::

    python main.py PUZZLE...               # print shortest solutions
    python main.py -v PUZZLE               # also print every state on the way
    python main.py -q PUZZLE...            # timings only
    python main.py -f rich PUZZLE          # Rich terminal output
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from anima.frontend.cli.session import Settings  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "anima.frontend.cli.vanilla.app",
    Frontend.rich: "anima.frontend.cli.rich.app",
}


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    paths: list[Path] = typer.Argument(
        ..., metavar="PATHS",
        help="Puzzle files to solve.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Print states along with solutions.",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet",
        help="Do not print solutions.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="ANIMA_FRONTEND",
        help="Output style.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="ANIMA_LOG_LEVEL",
        help="Logging threshold for diagnostics on stderr.",
    ),
) -> None:
    """Find shortest command sequences for sliding-actor puzzles."""
    _configure_logging(log_level)
    settings = Settings(verbose=verbose, quiet=quiet)

    mod = importlib.import_module(_RUNNERS[frontend])
    status = mod.run(paths, settings)
    if status:
        raise typer.Exit(code=status)


if __name__ == "__main__":
    app()
