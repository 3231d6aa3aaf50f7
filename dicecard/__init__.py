"""A five-dice scorecard game with terminal and computer players, and a star battle puzzle solver."""

__version__ = "0.1.0"