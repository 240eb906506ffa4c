"""The Coup card game: players, roles, turn handling and a pygame table."""

__version__ = "0.1.0"