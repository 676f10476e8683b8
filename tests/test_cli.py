import io
import json
from unittest import mock

import pytest

from cinelog.cli import (
    build_library,
    compare_movies,
    main,
    open_media,
    play_movie,
    show_series_images,
)
from cinelog.ratings import RatingStore


@pytest.fixture
def store(tmp_path):
    path = tmp_path / "ratings.json"
    path.write_text(json.dumps({"1": [4, 5], "2": [3], "3": [4.5]}), encoding="utf-8")
    return RatingStore(path)


def _done(code=0):
    return mock.Mock(returncode=code)


def test_build_library_contents(store):
    library = build_library(store)
    assert [m.content_id for m in library.movies] == [1, 2, 3, 4, 5, 6]
    assert [s.content_id for s in library.series] == [7, 8, 9, 10]
    assert [m.name for m in library.movies_by_genre("Drama")] == [
        "Titanic",
        "The Godfather",
    ]


def test_build_library_episodes(store):
    library = build_library(store)
    drama = library.find_series(7)
    assert len(drama.episodes) == 12
    assert str(drama.episodes[-1]) == "T-3 : Episodio 12"
    assert len(library.find_series(8).episodes) == 5


def test_build_library_loads_ratings(store):
    library = build_library(store)
    assert library.find_movie(1).rating == pytest.approx(4.5)
    assert library.movies_by_rating()[-1].rating == 0.0


def test_build_library_without_file(tmp_path):
    library = build_library(RatingStore(tmp_path / "missing.json"))
    assert all(movie.rating == -1.0 for movie in library.movies)


def test_compare_movies_first_higher(store):
    library = build_library(store)
    text = compare_movies(library.find_movie(1), library.find_movie(2))
    lines = text.splitlines()
    assert lines[0] == "Comparando:"
    assert lines[-1] == "Avengers Endgame tiene mayor calificación."


def test_compare_movies_second_higher(store):
    library = build_library(store)
    text = compare_movies(library.find_movie(2), library.find_movie(1))
    assert text.splitlines()[-1] == "Avengers Endgame tiene mayor calificación."


def test_compare_movies_equal(store):
    library = build_library(store)
    text = compare_movies(library.find_movie(1), library.find_movie(3))
    assert text.splitlines()[-1] == "Ambas películas tienen la misma calificación."


@mock.patch("cinelog.cli.subprocess.run")
def test_open_media_returns_status(run):
    run.return_value = _done(3)
    assert open_media("assets/x.mp4") == 3
    run.assert_called_once_with(["open", "assets/x.mp4"], check=False)


@mock.patch("cinelog.cli.subprocess.run", side_effect=FileNotFoundError)
def test_open_media_missing_command(run):
    assert open_media("assets/x.mp4") == 127


@mock.patch("cinelog.cli.subprocess.run")
def test_play_movie_declined(run):
    assert play_movie(2, "NO") is False
    run.assert_not_called()


@mock.patch("cinelog.cli.subprocess.run")
def test_play_movie_opens_video(run):
    run.return_value = _done(0)
    assert play_movie(2, "si") is True
    run.assert_called_once_with(["open", "assets/pelicula_2.mp4"], check=False)


@mock.patch("cinelog.cli.subprocess.run")
def test_play_movie_unavailable(run):
    with pytest.raises(ValueError):
        play_movie(4, "SI")
    run.assert_not_called()


@mock.patch("cinelog.cli.subprocess.run")
def test_play_movie_viewer_failure(run):
    run.return_value = _done(1)
    with pytest.raises(RuntimeError):
        play_movie(1, "SI")


@mock.patch("cinelog.cli.subprocess.run")
def test_show_series_images_all(run):
    run.return_value = _done(0)
    assert show_series_images("SI") is True
    assert run.call_count == 10
    assert run.call_args_list[0].args[0] == ["open", "assets/series/serie_1.jpeg"]


@mock.patch("cinelog.cli.subprocess.run")
def test_show_series_images_stops_on_failure(run):
    run.return_value = _done(2)
    with pytest.raises(RuntimeError):
        show_series_images("si")
    assert run.call_count == 1


@mock.patch("cinelog.cli.subprocess.run")
def test_show_series_images_declined(run):
    assert show_series_images("no") is False
    run.assert_not_called()


def _run(monkeypatch, capsys, text, path):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(["--ratings", str(path)])
    return code, capsys.readouterr()


def test_main_exit(monkeypatch, capsys, store):
    code, captured = _run(monkeypatch, capsys, "5\n", store.path)
    assert code == 0
    assert "5. Salir" in captured.out


def test_main_end_of_input(monkeypatch, capsys, store):
    code, captured = _run(monkeypatch, capsys, "", store.path)
    assert code == 0
    assert captured.out.count("1. Mostrar Películas") == 1


def test_main_full_listing(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "3\n5\n", store.path)
    assert "Película: Titanic" in captured.out
    assert "Serie: Serie de Misterio" in captured.out


def test_main_invalid_option(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "9\n5\n", store.path)
    assert "Opción no válida, intente de nuevo." in captured.out


def test_main_compare(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "4 1 2\n5\n", store.path)
    assert "Avengers Endgame tiene mayor calificación." in captured.out


def test_main_compare_missing(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "4 1 42\n5\n", store.path)
    assert "Una o ambas películas no fueron encontradas." in captured.out


@mock.patch("cinelog.cli.subprocess.run")
def test_main_rates_movie(run, monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "1 1 5 SI 4 NO\n5\n", store.path)
    assert "Duración: 175 minutos" in captured.out
    assert store.average(5) == pytest.approx(4.0)
    run.assert_not_called()


def test_main_rejects_out_of_range_rating(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "1 1 6 SI 9 NO\n5\n", store.path)
    assert "Calificación inválida. Debe estar entre 0 y 5." in captured.out
    with pytest.raises(KeyError):
        store.average(6)


def test_main_invalid_movie_id(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "1 1 9\n5\n", store.path)
    assert "ID de película no válido." in captured.out


def test_main_movies_filtered_by_genre(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "1 2 1 Misterio 0\n5\n", store.path)
    assert "Película: Inception" in captured.out
    assert "Película: Interstellar" in captured.out
    assert "Película: Titanic" not in captured.out


def test_main_series_detail(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "2 regular 1 NO NO\n5\n", store.path)
    assert "Episodios de la serie Serie de Drama:" in captured.out
    assert "T-3 : Episodio 12" in captured.out


def test_main_invalid_series_id(monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "2 regular 7\n5\n", store.path)
    assert "ID de serie no válido." in captured.out


@mock.patch("cinelog.cli.subprocess.run")
def test_main_unavailable_video(run, monkeypatch, capsys, store):
    _, captured = _run(monkeypatch, capsys, "1 1 4 NO SI\n5\n", store.path)
    assert "Por ahora no tenemos la 4" in captured.err
    run.assert_not_called()