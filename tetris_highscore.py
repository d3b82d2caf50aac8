
"""High score persistence"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

class HighScoreStore:
    """Single integer kept as {"high_score": n} in a JSON file."""
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Optional[int]:
        if not self.path.exists():
            logger.info("no saved high score at %s", self.path)
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            score = int(data["high_score"])
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning("could not read high score from %s: %s", self.path, e)
            return None
        if score < 0:
            logger.warning("ignoring negative high score %d in %s", score, self.path)
            return None
        logger.info("loaded high score %d", score)
        return score

    def save(self, score: int) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({"high_score": int(score)}), encoding="utf-8")
        except OSError as e:
            logger.warning("could not save high score to %s: %s", self.path, e)
            return False
        logger.info("saved high score %d", score)
        return True

class MemoryHighScoreStore:
    def __init__(self, score: Optional[int]=None):
        self.score = score
        self.saves = 0

    def load(self) -> Optional[int]:
        return self.score

    def save(self, score: int) -> bool:
        self.score = score; self.saves += 1
        return True

def open_store(path: str):
    if path == ":memory:": return MemoryHighScoreStore()
    return HighScoreStore(path)
