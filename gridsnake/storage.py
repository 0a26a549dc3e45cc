from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def read_high_score(self) -> int: ...

    def write_high_score(self, score: int) -> None: ...


class MemoryHighScoreStore:
    def __init__(self, score: int = 0) -> None:
        self.score = score
        self.writes = 0

    def read_high_score(self) -> int:
        return self.score

    def write_high_score(self, score: int) -> None:
        self.score = score
        self.writes += 1


class JsonHighScoreStore:
    """
    Keeps the best score in a small JSON document: {"high_score": 12}.

    Reads and writes are best effort. A missing, unreadable or malformed
    file reads as 0, and a failed write is logged and dropped.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def read_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            score = int(data.get("high_score", 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Could not read high score from {self.path}: {e}")
            return 0
        return max(score, 0)

    def write_high_score(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": int(score)}), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write high score to {self.path}: {e}")
            return
        logger.info(f"Saved high score {score} to {self.path}")
