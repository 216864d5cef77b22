"""Small programming exercises grouped by theme, with a command to start new ones."""

__version__ = "0.1.0"