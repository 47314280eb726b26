"""Shared test fixtures and configuration for pytest."""

import asyncio
from typing import Any

import pytest

from quizzical.config.settings import get_settings
from quizzical.models.quiz import Answer, Question, RawQuestion
from quizzical.quiz.controller import QuizController


class FakeSource:
    """Question source that returns canned records or raises a canned error."""

    def __init__(self, records: list[RawQuestion] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls = 0

    async def fetch_questions(self) -> list[RawQuestion]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.records)


def first_slot(n: int) -> int:
    """Always put the correct answer first."""
    return 0


def last_slot(n: int) -> int:
    """Always put the correct answer last."""
    return n


def answer_questions(controller: QuizController, correct: int, answered: int | None = None) -> None:
    """
    Answer the first ``answered`` questions, the first ``correct`` of them correctly.
    """
    questions = controller.questions
    answered = len(questions) if answered is None else answered
    for index, question in enumerate(questions[:answered]):
        wanted = index < correct
        answer = next(a for a in question.answers if a.is_correct is wanted)
        controller.select_answer(question.id, answer.id)


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Five records shaped like the trivia API's results."""
    return [
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "General Knowledge",
            "question": "What is the capital of France?",
            "correct_answer": "Paris",
            "incorrect_answers": ["London", "Berlin", "Madrid"],
        },
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "General Knowledge",
            "question": "Which company makes the &quot;iPhone&quot;?",
            "correct_answer": "Apple",
            "incorrect_answers": ["Samsung", "Nokia", "Sony"],
        },
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "General Knowledge",
            "question": "What is 2 + 2?",
            "correct_answer": "4",
            "incorrect_answers": ["3", "5", "6"],
        },
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "General Knowledge",
            "question": "Who wrote &#039;1984&#039;?",
            "correct_answer": "George Orwell",
            "incorrect_answers": ["Aldous Huxley", "Ray Bradbury", "Philip K. Dick"],
        },
        {
            "type": "multiple",
            "difficulty": "easy",
            "category": "General Knowledge",
            "question": "Which of these is a fish?",
            "correct_answer": "Salmon",
            "incorrect_answers": ["Dolphin", "Whale", "Seal"],
        },
    ]


@pytest.fixture
def raw_questions(sample_records: list[dict[str, Any]]) -> list[RawQuestion]:
    """Sample records validated as RawQuestion models."""
    return [RawQuestion.model_validate(record) for record in sample_records]


@pytest.fixture
def sample_questions() -> list[Question]:
    """Two hand-built questions with known ids."""
    return [
        Question(
            id="q1",
            text="What is the capital of France?",
            answers=[
                Answer(id="q1-a", text="London"),
                Answer(id="q1-b", text="Paris", is_correct=True),
                Answer(id="q1-c", text="Berlin"),
            ],
        ),
        Question(
            id="q2",
            text="What is 2 + 2?",
            answers=[
                Answer(id="q2-a", text="4", is_correct=True),
                Answer(id="q2-b", text="5"),
            ],
        ),
    ]


@pytest.fixture
def source(raw_questions: list[RawQuestion]) -> FakeSource:
    """Source that serves the five sample questions."""
    return FakeSource(records=raw_questions)


@pytest.fixture
def controller(source: FakeSource) -> QuizController:
    """Controller in the Empty phase."""
    return QuizController(source, random_index=first_slot)


@pytest.fixture
def active_controller(controller: QuizController) -> QuizController:
    """Controller with the five sample questions loaded."""
    asyncio.run(controller.start())
    return controller


@pytest.fixture
def answer():
    """Helper that answers questions on a controller."""
    return answer_questions


@pytest.fixture
def make_controller():
    """Factory for controllers over arbitrary records or errors."""

    def _make(records=None, error=None, random_index=first_slot):
        return QuizController(FakeSource(records=records, error=error), random_index=random_index)

    return _make


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear quizzical environment overrides and the settings cache."""
    for name in ("TRIVIA_API_URL", "REQUEST_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
