"""Data structures and parsers for running CI steps, GitHub Actions in particular, in containers."""

__version__ = "0.15.4"