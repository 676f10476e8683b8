"""Terminal catalogue of movies and series with ratings kept in a JSON file."""

__version__ = "0.1.0"
__all__ = ["ratings", "content", "library", "cli"]