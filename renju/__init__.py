"""Five-in-a-row board game for the terminal, with a simple computer opponent."""

__version__ = "0.2.0"