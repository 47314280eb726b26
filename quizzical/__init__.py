"""Quizzical - a five-question general knowledge quiz."""

__version__ = "0.1.0"
