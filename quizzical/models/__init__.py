"""Data models for the quiz session."""

from .quiz import (
    Answer,
    Question,
    QuizPhase,
    QuizSnapshot,
    # Upstream payload models
    RawQuestion,
    TriviaResponse,
)

__all__ = [
    "Answer",
    "Question",
    "QuizPhase",
    "QuizSnapshot",
    "RawQuestion",
    "TriviaResponse",
]
