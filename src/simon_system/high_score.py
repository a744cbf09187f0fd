"""
High score persistence - JSON key/value file and in-memory store
"""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .interfaces import IHighScoreStore

if TYPE_CHECKING:
    from utils import ClassLogger


HIGH_SCORE_KEY = "simonHighScore"


def parse_high_score(raw) -> int:
    """
    Interpret a stored value as a high score.

    Accepts ints and numeric strings ("12"); anything else (None, negative
    numbers, "abc", floats, booleans) counts as absent.

    Raises:
        ValueError: If the value is not a usable high score
    """
    if isinstance(raw, bool):
        raise ValueError(f"Not a high score: {raw!r}")
    if isinstance(raw, str):
        raw = int(raw.strip())
    if not isinstance(raw, int):
        raise ValueError(f"Not a high score: {raw!r}")
    if raw < 0:
        raise ValueError(f"High score cannot be negative: {raw}")
    return raw


class JsonHighScoreStore(IHighScoreStore):
    """
    Keeps the high score under a single key of a small JSON file.

    Other keys already in the file are preserved on save. A missing file,
    invalid JSON or an unusable value all load as 0 with a warning; a failed
    write is logged and the game goes on.

    Example:
        store = JsonHighScoreStore("simon_scores.json", logger)
        best = store.load_high_score()
        store.save_high_score(best + 1)
    """

    def __init__(self, path: Union[str, Path], logger: 'ClassLogger', key: str = HIGH_SCORE_KEY):
        self.path = Path(path)
        self.key = key
        self._logger = logger

    def _read_document(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            document = json.load(f)
        if not isinstance(document, dict):
            raise ValueError(f"Expected a JSON object in {self.path}")
        return document

    def load_high_score(self) -> int:
        try:
            document = self._read_document()
        except (OSError, ValueError) as e:
            self._logger.warning(f"Could not read high score file {self.path}: {e} - using 0")
            return 0

        if self.key not in document:
            self._logger.debug(f"No high score stored in {self.path} - using 0")
            return 0

        try:
            value = parse_high_score(document[self.key])
        except ValueError as e:
            self._logger.warning(f"Ignoring stored high score: {e}")
            return 0

        self._logger.info(f"Loaded high score {value} from {self.path}")
        return value

    def save_high_score(self, value: int) -> None:
        try:
            document = self._read_document()
        except (OSError, ValueError):
            document = {}

        # Stored as a string, the way browser key/value storage keeps it
        document[self.key] = str(value)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2)
            self._logger.debug(f"Saved high score {value} to {self.path}")
        except OSError as e:
            self._logger.error(f"Failed to save high score to {self.path}: {e}")


class MemoryHighScoreStore(IHighScoreStore):
    """In-memory store for development and tests; remembers every save"""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.saved_values = []

    def load_high_score(self) -> int:
        return self.value

    def save_high_score(self, value: int) -> None:
        self.value = value
        self.saved_values.append(value)
