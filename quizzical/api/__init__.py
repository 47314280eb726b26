"""Trivia API client."""

from .trivia_client import TriviaClient

__all__ = ["TriviaClient"]
