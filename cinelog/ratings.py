"""Persistent per-title ratings kept in a JSON file."""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_PATH = "calificaciones.json"


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class RatingStore:
    """Stores every rating given to a title, keyed by the title's id.

    The file holds one JSON object whose keys are ids written as strings
    and whose values are lists of ratings.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def add(self, content_id: int, rating: float) -> None:
        """Append a rating for ``content_id`` and rewrite the file.

        A missing or empty file starts a fresh document. Raises
        ``ValueError`` when the existing file is not valid JSON or does
        not have the expected shape, and ``OSError`` when it cannot be
        written.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            text = ""

        data = json.loads(text) if text else None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")

        key = str(content_id)
        ratings = data.get(key)
        if ratings is None:
            ratings = data[key] = []
        if not isinstance(ratings, list):
            raise ValueError(f"ratings for id {key} are not a list")
        ratings.append(rating)

        self.path.write_text(
            json.dumps(data, indent=4, ensure_ascii=False), encoding="utf-8"
        )

    def average(self, content_id: int, first_get: bool = False) -> float:
        """Return the mean rating stored for ``content_id``.

        An empty or unparsable file gives 0. A title with no ratings gives
        0 when ``first_get`` is set and raises ``KeyError`` otherwise.
        Raises ``FileNotFoundError`` when the file does not exist and
        ``ValueError`` when a stored rating is not a number.
        """
        text = self.path.read_text(encoding="utf-8")
        if not text:
            return 0.0
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            return 0.0

        key = str(content_id)
        ratings = data.get(key) if isinstance(data, dict) else None
        if not isinstance(ratings, list):
            if not first_get:
                raise KeyError(f"no ratings for id {key}")
            return 0.0
        if not ratings:
            return 0.0

        bad = [value for value in ratings if not _is_number(value)]
        if bad:
            raise ValueError(f"rating {bad[0]!r} for id {key} is not a number")
        return sum(ratings) / len(ratings)