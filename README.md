# cinelog

cinelog is a small interactive catalogue of movies and series for the terminal.
You can browse the catalogue, filter titles by genre, sort them by their average
rating, look at a title's details and episodes, rate a title from 0 to 5 and
compare the ratings of two movies. The menus and messages are in Spanish.

Ratings are kept in a JSON file, `calificaciones.json` in the current directory
by default. The file holds one object whose keys are title ids written as
strings and whose values are the lists of ratings each title has received. The
rating shown for a title is the mean of its list.

## Installation

```
pip install .
```

## Running

```
cinelog
cinelog --ratings path/to/ratings.json
```

`--ratings` chooses the JSON file that holds the ratings.

The main menu is numbered. Answers are read as whitespace-separated words, so
type a number and press Enter:

1. List the movies, with regular search or advanced search (filter by genre or
   sort by rating), then pick one (1-6) to see its details, rate it and open its
   video.
2. List the series the same way (type `avanzada` for advanced search), then pick
   one (1-4) to see its details and episodes, rate it and open its images.
3. List the whole catalogue.
4. Compare the ratings of two movies by id.
5. Quit.

The program also stops when input ends. Yes/no questions accept `SI` or `si`
as yes; anything else counts as no.

The catalogue is fixed: six movies (ids 1-6) and four series (ids 7-10) are
built by `cinelog.cli.build_library`.

Videos and images are opened with the system's `open` command and looked up
under `assets/` in the current directory: `assets/pelicula_<id>.mp4` for movies
and `assets/series/serie_1.jpeg` to `assets/series/serie_10.jpeg` for series.
Movie 4 has no video. When `open` is missing or fails, an error with its exit
status is printed and the menu carries on.

## Using it as a library

```python
from cinelog.ratings import RatingStore
from cinelog.content import Movie, Series
from cinelog.library import Library

store = RatingStore("calificaciones.json")
library = Library()

movie = Movie(1, "Titanic", 195, "Drama", store)
library.add_movie(movie)
movie.rate(4.5)              # records the rating, returns the new average
print(movie.rating_line())   # "Calificación media: 4.5" on a fresh file

show = Series(7, "Serie de Drama", 40, "Drama", store)
show.add_episode("Episodio 1")
library.add_series(show)

print(library.full_listing())
print([m.name for m in library.movies_by_rating()])
```

- `RatingStore.add(content_id, rating)` appends a rating and rewrites the file;
  `RatingStore.average(content_id, first_get=False)` returns the mean. An empty
  or unparsable file gives 0; a title without ratings gives 0 when `first_get`
  is set and raises `KeyError` otherwise.
- A title loads its average when it is created; if the file cannot be read its
  `rating` is -1.
- `Content.rate` raises `ValueError` for a rating outside 0-5. Titles compare
  with `>` by average rating.
- A series holds at most 12 episodes, four per season; one more raises
  `ValueError`. Its `detail()` shows the episode length times the number of
  episodes.
- A `Library` holds at most 100 movies and 100 series; one more raises
  `LibraryFullError`. `find_movie` and `find_series` return `None` when no title
  has the id.
- `cinelog.cli.compare_movies(first, second)` returns the comparison text shown
  by menu option 4.

## What it does not do

There is no way to add, edit or remove titles from the command line; the
catalogue shown by `cinelog` is always the same ten titles. Media is not played
by the package itself: it only asks the system's `open` command to show the
files.

## Tests

```
pip install .[test]
pytest
```