"""Galaxy, planet and star chart generation for the Far Horizons strategy game."""

__version__ = "0.1.0"