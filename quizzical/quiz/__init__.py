"""Quiz construction, answer selection and lifecycle control."""

from .builder import build_questions
from .controller import PASS_SCORE, QuizController
from .factory import RandomIndex, create_answer, create_question, default_random_index
from .selection import all_answered, count_correct, select_answer

__all__ = [
    "PASS_SCORE",
    "QuizController",
    "RandomIndex",
    "all_answered",
    "build_questions",
    "count_correct",
    "create_answer",
    "create_question",
    "default_random_index",
    "select_answer",
]
