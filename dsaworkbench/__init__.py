"""Classic data structures and algorithm exercises in plain Python."""

__version__ = "0.1.0"