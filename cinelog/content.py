"""Catalogue entries: movies, series and their episodes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from cinelog.ratings import RatingStore

MIN_RATING = 0
MAX_RATING = 5
MAX_EPISODES = 12
EPISODES_PER_SEASON = 4


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class Episode:
    """One episode of a series."""

    title: str
    season: int

    def __str__(self) -> str:
        return f"T-{self.season} : {self.title}"


class Content(ABC):
    """A rateable title in the catalogue.

    The current average rating is loaded from the store on creation; it
    is -1 when the store cannot be read.
    """

    def __init__(
        self,
        content_id: int,
        name: str,
        duration: int,
        genre: str,
        store: RatingStore,
    ) -> None:
        self.content_id = content_id
        self.name = name
        self.duration = duration
        self.genre = genre
        self.store = store
        try:
            self.rating = store.average(content_id, first_get=True)
        except (OSError, ValueError):
            self.rating = -1.0

    def rate(self, rating: float) -> float:
        """Record a new rating and return the updated average."""
        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValueError("Calificación inválida. Debe estar entre 0 y 10.")
        self.store.add(self.content_id, rating)
        self.rating = self.store.average(self.content_id)
        return self.rating

    def rating_line(self) -> str:
        return f"Calificación media: {_format_number(self.rating)}"

    @abstractmethod
    def label(self) -> str:
        """One-line name of the title."""

    @abstractmethod
    def detail(self) -> str:
        """Multi-line description of the title."""

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Content):
            return NotImplemented
        return self.rating > other.rating


class Movie(Content):
    """A single film."""

    def label(self) -> str:
        return f"Película: {self.name}"

    def detail(self) -> str:
        return "\n".join(
            [
                f"ID: {self.content_id}",
                f"Película: {self.name}",
                f"Duración: {self.duration} minutos",
                f"Género: {self.genre}",
            ]
        )


class Series(Content):
    """A series of up to twelve episodes, four per season."""

    def __init__(
        self,
        content_id: int,
        name: str,
        duration: int,
        genre: str,
        store: RatingStore,
    ) -> None:
        super().__init__(content_id, name, duration, genre, store)
        self.episodes: list[Episode] = []

    def add_episode(self, title: str) -> Episode:
        """Append an episode, placing it in the next free season slot."""
        if len(self.episodes) >= MAX_EPISODES:
            raise ValueError("No se pueden agregar más episodios.")
        episode = Episode(title, len(self.episodes) // EPISODES_PER_SEASON + 1)
        self.episodes.append(episode)
        return episode

    def episode_listing(self) -> str:
        lines = [f"Episodios de la serie {self.name}:"]
        lines.extend(str(episode) for episode in self.episodes)
        return "\n".join(lines)

    def label(self) -> str:
        return f"Serie: {self.name}"

    def detail(self) -> str:
        total = self.duration * len(self.episodes)
        return "\n".join(
            [
                f"ID: {self.content_id}",
                f"Serie: {self.name}",
                f"Duración: {total} minutos",
                f"Género: {self.genre}",
            ]
        )