"""The catalogue of movies and series available to browse."""

from __future__ import annotations

from cinelog.content import Content, Movie, Series

MAX_MOVIES = 100
MAX_SERIES = 100


class LibraryFullError(Exception):
    """Raised when a title is added to a full section of the library."""


def _by_rating(titles: list) -> list:
    return sorted(titles, key=lambda title: title.rating, reverse=True)


def _listing(header: str, titles: list[Content]) -> str:
    return "\n".join([header, *(title.label() for title in titles)])


class Library:
    """Holds up to a hundred movies and a hundred series."""

    def __init__(self) -> None:
        self.movies: list[Movie] = []
        self.series: list[Series] = []

    def add_movie(self, movie: Movie) -> None:
        """Add a movie, raising ``LibraryFullError`` when there is no room."""
        if len(self.movies) >= MAX_MOVIES:
            raise LibraryFullError("No se pueden agregar más películas.")
        self.movies.append(movie)

    def add_series(self, series: Series) -> None:
        """Add a series, raising ``LibraryFullError`` when there is no room."""
        if len(self.series) >= MAX_SERIES:
            raise LibraryFullError("No se pueden agregar más series.")
        self.series.append(series)

    def movie_listing(self) -> str:
        return _listing("Películas:", self.movies)

    def series_listing(self) -> str:
        return _listing("Series:", self.series)

    def full_listing(self) -> str:
        return f"{self.movie_listing()}\n\n{self.series_listing()}"

    def find_movie(self, content_id: int) -> Movie | None:
        """Return the first movie with ``content_id``, or None."""
        return next(
            (movie for movie in self.movies if movie.content_id == content_id),
            None,
        )

    def find_series(self, content_id: int) -> Series | None:
        """Return the first series with ``content_id``, or None."""
        return next(
            (series for series in self.series if series.content_id == content_id),
            None,
        )

    def movies_by_genre(self, genre: str) -> list[Movie]:
        return [movie for movie in self.movies if movie.genre == genre]

    def movies_by_rating(self) -> list[Movie]:
        """Movies from highest to lowest average rating."""
        return _by_rating(self.movies)

    def series_by_genre(self, genre: str) -> list[Series]:
        return [series for series in self.series if series.genre == genre]

    def series_by_rating(self) -> list[Series]:
        """Series from highest to lowest average rating."""
        return _by_rating(self.series)