"""Tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from quizzical.models.quiz import (
    Answer,
    Question,
    QuizPhase,
    QuizSnapshot,
    RawQuestion,
    TriviaResponse,
)


class TestAnswer:
    """Test Answer model."""

    def test_defaults(self):
        """Test that a new answer is unselected and incorrect by default."""
        answer = Answer(text="Paris")

        assert answer.is_correct is False
        assert answer.is_selected is False

    def test_ids_are_unique(self):
        """Test that each answer gets its own id."""
        assert Answer(text="A").id != Answer(text="A").id


class TestQuestion:
    """Test Question model."""

    def test_selected_answer(self, sample_questions: list[Question]):
        """Test selected_answer returns None until one is picked."""
        question = sample_questions[0]
        assert question.selected_answer is None

        question.answers[1].is_selected = True
        assert question.selected_answer.text == "Paris"

    def test_is_answered(self, sample_questions: list[Question]):
        """Test the is_answered property."""
        question = sample_questions[0]
        assert question.is_answered is False

        question.answers[0].is_selected = True
        assert question.is_answered is True

    def test_is_answered_correctly(self, sample_questions: list[Question]):
        """Test is_answered_correctly only counts a selected correct answer."""
        question = sample_questions[0]
        question.answers[0].is_selected = True
        assert question.is_answered_correctly is False

        question.answers[0].is_selected = False
        question.answers[1].is_selected = True
        assert question.is_answered_correctly is True


class TestRawQuestion:
    """Test upstream record validation."""

    def test_ignores_extra_fields(self, sample_records: list[dict]):
        """Test that category and difficulty are dropped."""
        raw = RawQuestion.model_validate(sample_records[0])

        assert raw.question == "What is the capital of France?"
        assert raw.correct_answer == "Paris"
        assert raw.incorrect_answers == ["London", "Berlin", "Madrid"]
        assert not hasattr(raw, "category")

    def test_requires_correct_answer(self):
        """Test that a record without a correct answer is rejected."""
        with pytest.raises(ValidationError):
            RawQuestion.model_validate({"question": "Q?", "incorrect_answers": ["a"]})


class TestTriviaResponse:
    """Test response envelope validation."""

    def test_results_default_to_empty(self):
        """Test that an error envelope without results validates."""
        response = TriviaResponse.model_validate({"response_code": 1})

        assert response.response_code == 1
        assert response.results == []

    def test_parses_results(self, sample_records: list[dict]):
        """Test that results are parsed into RawQuestion models."""
        response = TriviaResponse.model_validate(
            {"response_code": 0, "results": sample_records}
        )

        assert len(response.results) == 5
        assert all(isinstance(r, RawQuestion) for r in response.results)


class TestQuizSnapshot:
    """Test QuizSnapshot model."""

    def test_is_frozen(self):
        """Test that snapshots cannot be modified."""
        snapshot = QuizSnapshot(phase=QuizPhase.EMPTY)

        with pytest.raises(ValidationError):
            snapshot.show_results = True

    def test_total_questions(self, sample_questions: list[Question]):
        """Test the total_questions property."""
        snapshot = QuizSnapshot(phase=QuizPhase.ACTIVE, questions=sample_questions)

        assert snapshot.total_questions == 2


class TestQuizPhase:
    """Test QuizPhase enum."""

    def test_phase_values(self):
        """Test phase enum values."""
        assert QuizPhase.EMPTY.value == "empty"
        assert QuizPhase.LOADING.value == "loading"
        assert QuizPhase.ACTIVE.value == "active"
        assert QuizPhase.RESULTS.value == "results"
