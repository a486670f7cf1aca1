"""High score persistence and management."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class HighScoreEntry:
    points: int
    moves: int
    date: str


class HighScoreManager:
    """Loads, saves, and queries high scores from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._scores: dict[str, list[HighScoreEntry]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            for size_key, entries in data.items():
                self._scores[size_key] = [
                    HighScoreEntry(**e) for e in entries
                ]

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, list[dict]] = {
            size_key: [asdict(e) for e in entries]
            for size_key, entries in self._scores.items()
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def add_score(self, size: int, entry: HighScoreEntry) -> None:
        if entry.points <= 0:
            return
        key = str(size)
        self._scores.setdefault(key, []).append(entry)
        # Most points first; fewer moves break ties.
        self._scores[key].sort(key=lambda e: (-e.points, e.moves))
        self.save()

    def get_scores(self, size: int) -> list[HighScoreEntry]:
        return self._scores.get(str(size), [])

    def best(self, size: int) -> int:
        scores = self.get_scores(size)
        return scores[0].points if scores else 0

    def get_all_sizes(self) -> list[int]:
        return sorted(int(k) for k in self._scores)
