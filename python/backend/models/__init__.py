from backend.models.board import Board, Direction, OutOfBoundsError, Position
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.match import BoardSnapshot, Match
from backend.models.tile import Tile, TileSource

__all__ = [
    "Board",
    "BoardSnapshot",
    "Direction",
    "HighScoreEntry",
    "HighScoreManager",
    "Match",
    "OutOfBoundsError",
    "Position",
    "Tile",
    "TileSource",
]
