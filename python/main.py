#!/usr/bin/env python3
"""Tile Merge — a match-three puzzle where matched tiles merge upwards.

Usage::

    python main.py                  # interactive menu, 8×8 board
    python main.py -s 6 --speed fast
    python main.py --seed 42 --new  # reproducible fresh game
    python main.py --scores         # view high scores
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.highscore import HighScoreManager  # noqa: E402
from frontend.cli.rich.app import AnimationSpeed, print_highscores, run  # noqa: E402


def _configure_logging(verbose: bool) -> None:
    # The terminal belongs to the UI, so logs go to a file.
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.FileHandler(DATA_DIR / "tilemerge.log", mode="w", encoding="utf-8"),
        ],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        8, "-s", "--size",
        min=3, max=12,
        help="Grid size (3-12).",
    ),
    speed: AnimationSpeed = typer.Option(
        AnimationSpeed.medium, "--speed",
        help="How long each animation frame stays on screen.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the tile generator for a reproducible game.",
    ),
    new: bool = typer.Option(
        False, "--new",
        help="Ignore any saved game.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show high scores and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Write debug logs to data/tilemerge.log.",
    ),
) -> None:
    """Tile Merge puzzle."""
    _configure_logging(verbose)

    if scores:
        print_highscores(HighScoreManager(DATA_DIR / "highscores.json"))
        return

    run(size=size, data_dir=DATA_DIR, speed=speed, seed=seed, resume=not new)


if __name__ == "__main__":
    app()
