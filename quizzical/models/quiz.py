"""Pydantic models for quiz data structures."""

import uuid
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    """Generate an opaque unique identifier."""
    return str(uuid.uuid4())


class QuizPhase(str, Enum):
    """Lifecycle phases of a quiz session."""

    EMPTY = "empty"
    LOADING = "loading"
    ACTIVE = "active"
    RESULTS = "results"


class Answer(BaseModel):
    """A single answer choice within a question."""

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier for the answer",
    )
    text: str = Field(..., description="Decoded answer text")
    is_correct: bool = Field(default=False, description="Whether this is the right answer")
    is_selected: bool = Field(default=False, description="Whether the player picked it")

    model_config = {
        "json_schema_extra": {
            "example": {
                "text": "Paris",
                "is_correct": True,
                "is_selected": False,
            }
        }
    }


class Question(BaseModel):
    """A multiple choice question with exactly one correct answer."""

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier for the question",
    )
    text: str = Field(..., description="Decoded question prompt")
    answers: list[Answer] = Field(
        default_factory=list,
        description="Answer choices in display order",
    )

    @property
    def selected_answer(self) -> Answer | None:
        """Get the selected answer, if any."""
        return next((a for a in self.answers if a.is_selected), None)

    @property
    def is_answered(self) -> bool:
        """Whether at least one answer is selected."""
        return any(a.is_selected for a in self.answers)

    @property
    def is_answered_correctly(self) -> bool:
        """Whether the selected answer is the correct one."""
        return any(a.is_selected and a.is_correct for a in self.answers)


# Upstream payload models


class RawQuestion(BaseModel):
    """One question record as delivered by the trivia API."""

    question: str
    incorrect_answers: list[str]
    correct_answer: str

    model_config = ConfigDict(extra="ignore")


class TriviaResponse(BaseModel):
    """Response envelope from the trivia API."""

    response_code: int
    results: list[RawQuestion] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class QuizSnapshot(BaseModel):
    """Read-only view of the quiz session handed to presentation."""

    phase: QuizPhase
    questions: list[Question] = Field(default_factory=list)
    show_results: bool = False
    all_answered: bool = False
    is_loading: bool = False
    error: str | None = None
    score: int = Field(default=0, ge=0)
    passed: bool = False
    has_finished: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def total_questions(self) -> int:
        """Get the number of questions in the quiz."""
        return len(self.questions)
