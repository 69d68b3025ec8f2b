"""greedle: greedy, frequency-ranked Wordle solver."""

__version__ = "0.1.0"
