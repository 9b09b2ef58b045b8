"""A terminal todo manager with a Tokyo Night colour theme."""

__version__ = "0.1.0"