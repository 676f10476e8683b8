"""Interactive menu for browsing, rating and playing the catalogue."""

from __future__ import annotations

import argparse
import subprocess
import sys
from collections.abc import Iterator
from typing import TextIO

from cinelog.content import MAX_RATING, MIN_RATING, Content, Movie, Series
from cinelog.library import Library
from cinelog.ratings import DEFAULT_PATH, RatingStore

YES_ANSWERS = ("SI", "si")
UNAVAILABLE_MOVIE = 4
SERIES_IMAGE_COUNT = 10
SERIES_ID_OFFSET = 6
COMMAND_NOT_FOUND = 127

_MOVIES = [
    (1, "Avengers Endgame", 180, "Accion"),
    (2, "The Dark Knight", 152, "Accion"),
    (3, "Titanic", 195, "Drama"),
    (4, "Inception", 148, "Misterio"),
    (5, "The Godfather", 175, "Drama"),
    (6, "Interstellar", 169, "Misterio"),
]

_SERIES = [
    (7, "Serie de Drama", 40, "Drama", 12),
    (8, "Serie de Accion", 50, "Accion", 5),
    (9, "Serie de Misterio", 45, "Misterio", 3),
    (10, "Serie de Accion", 55, "Accion", 3),
]

_MAIN_MENU = "\n".join(
    [
        "1. Mostrar Películas",
        "2. Mostrar Series",
        "3. Mostrar Contenido",
        "4. Comparar calificación entre dos películas",
        "5. Salir",
    ]
)

_ADVANCED_MENU = (
    "Opciones avanzadas:\n1. Filtrar por género\n2. Ordenar por calificación\n"
    "Selecciona opción (1-2): "
)


def build_library(store: RatingStore) -> Library:
    """Create the catalogue of six movies and four series."""
    library = Library()
    for content_id, name, duration, genre in _MOVIES:
        library.add_movie(Movie(content_id, name, duration, genre, store))
    for content_id, name, duration, genre, episodes in _SERIES:
        series = Series(content_id, name, duration, genre, store)
        for number in range(1, episodes + 1):
            series.add_episode(f"Episodio {number}")
        library.add_series(series)
    return library


def open_media(path: str) -> int:
    """Open ``path`` with the system viewer and return the exit status."""
    try:
        return subprocess.run(["open", path], check=False).returncode
    except FileNotFoundError:
        return COMMAND_NOT_FOUND


def _is_yes(answer: str) -> bool:
    return answer in YES_ANSWERS


def play_movie(content_id: int, answer: str) -> bool:
    """Play the movie's video when ``answer`` is yes.

    Returns False when the user declined. Raises ``ValueError`` for the
    movie that has no video and ``RuntimeError`` when the viewer fails.
    """
    if not _is_yes(answer):
        return False
    if content_id == UNAVAILABLE_MOVIE:
        raise ValueError(
            f"ID de vídeo inválido. Por ahora no tenemos la {UNAVAILABLE_MOVIE}"
        )
    status = open_media(f"assets/pelicula_{content_id}.mp4")
    if status != 0:
        raise RuntimeError(f"Error al abrir el vídeo (código {status})")
    return True


def show_series_images(answer: str) -> bool:
    """Open the series stills one after another when ``answer`` is yes.

    Returns False when the user declined; raises ``RuntimeError`` at the
    first image the viewer fails to open.
    """
    if not _is_yes(answer):
        return False
    for number in range(1, SERIES_IMAGE_COUNT + 1):
        status = open_media(f"assets/series/serie_{number}.jpeg")
        if status != 0:
            raise RuntimeError(f"Error al abrir el vídeo (código {status})")
    return True


def _format_rating(value: float) -> str:
    return f"{value:g}"


def compare_movies(first: Movie, second: Movie) -> str:
    """Describe which of two movies has the higher average rating."""
    if first > second:
        verdict = f"{first.name} tiene mayor calificación."
    elif second > first:
        verdict = f"{second.name} tiene mayor calificación."
    else:
        verdict = "Ambas películas tienen la misma calificación."
    return "\n".join(
        [
            "Comparando:",
            f"{first.name} (Calificación: {_format_rating(first.rating)}) vs "
            f"{second.name} (Calificación: {_format_rating(second.rating)})",
            verdict,
        ]
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Session:
    """Reads whitespace-separated answers and writes the menu text."""

    def __init__(
        self, library: Library, stdin: TextIO, stdout: TextIO, stderr: TextIO
    ) -> None:
        self.library = library
        self._tokens = _tokens(stdin)
        self.out = stdout
        self.err = stderr

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def prompt(self, text: str) -> None:
        print(text, end="", file=self.out)
        self.out.flush()

    def warn(self, text: str) -> None:
        print(text, file=self.err)

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError from None

    def integer(self) -> int | None:
        try:
            return int(self.word())
        except ValueError:
            return None

    def number(self) -> float | None:
        try:
            return float(self.word())
        except ValueError:
            return None

    def rate(self, content: Content, kind: str) -> None:
        self.say(f"\nQuieres calificar la {kind}?  SI / NO")
        if not _is_yes(self.word()):
            self.say("OK")
            return
        self.prompt("Ingrese una nueva calificación (0-5): ")
        rating = self.number()
        if rating is None or not MIN_RATING <= rating <= MAX_RATING:
            self.say("Calificación inválida. Debe estar entre 0 y 5.")
            return
        try:
            content.rate(rating)
        except (OSError, ValueError, KeyError) as error:
            self.warn(str(error))
            return
        self.say(content.rating_line())

    def show_titles(self, header: str, titles: list) -> None:
        self.say(header)
        for title in titles:
            self.say(title.label())

    def movies(self) -> None:
        library = self.library
        self.say("\nSelecciona el modo de búsqueda")
        self.say("1. Regular ")
        self.say("2. Avanzada")
        if self.integer() == 2:
            self.prompt(_ADVANCED_MENU)
            choice = self.integer()
            if choice == 1:
                self.prompt("Ingresa el género a filtrar (Accion/Drama/Misterio): ")
                genre = self.word()
                self.show_titles(
                    f"\nPelículas filtradas por género {genre}:",
                    library.movies_by_genre(genre),
                )
            elif choice == 2:
                self.show_titles(
                    "\nPelículas ordenadas por calificación (de mayor a menor):",
                    library.movies_by_rating(),
                )
            else:
                self.say("Opción avanzada no válida. Mostrando lista completa.")
                self.say("\n" + library.movie_listing())
        else:
            self.say("\n" + library.movie_listing())

        self.prompt("\nSeleccione una película para mostrar detalles (1-6): ")
        content_id = self.integer()
        if content_id is None or not 1 <= content_id <= 6:
            self.say("ID de película no válido.")
            return
        movie = library.find_movie(content_id)
        if movie is None:
            self.say("Película no encontrada.")
            return
        self.say("\n" + movie.detail())
        self.rate(movie, "película")
        self.say("\nQuieres ver la pelicula?  SI / NO")
        try:
            if not play_movie(content_id, self.word()):
                self.say("OK")
        except (ValueError, RuntimeError) as error:
            self.warn(str(error))

    def series(self) -> None:
        library = self.library
        self.prompt("\n¿Deseas búsqueda regular o avanzada? (regular/avanzada): ")
        if self.word() == "avanzada":
            self.prompt(_ADVANCED_MENU)
            choice = self.integer()
            if choice == 1:
                self.prompt("Ingresa el género a filtrar (Accion/Drama/Misterio): ")
                genre = self.word()
                self.show_titles(
                    f"\nSeries filtradas por género {genre}:",
                    library.series_by_genre(genre),
                )
            elif choice == 2:
                self.show_titles(
                    "\nSeries ordenadas por calificación (de mayor a menor):",
                    library.series_by_rating(),
                )
            else:
                self.say("Opción avanzada no válida. Mostrando lista completa.")
                self.say("\n" + library.series_listing())
        else:
            self.say("\n" + library.series_listing())

        self.prompt("\nSeleccione una serie para mostrar detalles (1-4): ")
        choice = self.integer()
        content_id = None if choice is None else choice + SERIES_ID_OFFSET
        if content_id is None or not 7 <= content_id <= 10:
            self.say("ID de serie no válido.")
            return
        series = library.find_series(content_id)
        if series is None:
            self.say("Serie no encontrada.")
            return
        self.say("\n" + series.detail())
        self.say(series.episode_listing())
        self.rate(series, "serie")
        self.say("\nQuieres ver la serie?  SI / NO")
        try:
            if not show_series_images(self.word()):
                self.say("OK")
        except RuntimeError as error:
            self.warn(str(error))

    def compare(self) -> None:
        self.prompt("Ingresa el ID de la primera película (1-6): ")
        first_id = self.integer()
        self.prompt("Ingresa el ID de la segunda película (1-6): ")
        second_id = self.integer()
        first = None if first_id is None else self.library.find_movie(first_id)
        second = None if second_id is None else self.library.find_movie(second_id)
        if first is None or second is None:
            self.say("Una o ambas películas no fueron encontradas.")
            return
        self.say("\n" + compare_movies(first, second))

    def run(self) -> None:
        while True:
            self.say(_MAIN_MENU)
            option = self.integer()
            if option == 1:
                self.movies()
            elif option == 2:
                self.series()
            elif option == 3:
                self.say("\n" + self.library.full_listing())
            elif option == 4:
                self.compare()
            elif option == 5:
                return
            else:
                self.say("Opción no válida, intente de nuevo.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive catalogue until the user leaves or input ends."""
    parser = argparse.ArgumentParser(
        prog="cinelog", description="Browse, rate and play the catalogue."
    )
    parser.add_argument(
        "--ratings",
        default=DEFAULT_PATH,
        help="JSON file holding the ratings (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    library = build_library(RatingStore(args.ratings))
    session = _Session(library, sys.stdin, sys.stdout, sys.stderr)
    try:
        session.run()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())