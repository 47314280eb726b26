"""Quiz Builder - Turns upstream records into quiz questions."""

from collections.abc import Iterable

from quizzical.models.quiz import Question, RawQuestion
from quizzical.quiz.factory import RandomIndex, create_question, default_random_index


def build_questions(
    raw_questions: Iterable[RawQuestion],
    random_index: RandomIndex = default_random_index,
) -> list[Question]:
    """
    Build the full question list for a quiz, preserving upstream order.

    Args:
        raw_questions: Records from the trivia API
        random_index: Source of the correct answer's insertion index

    Returns:
        List of Question objects
    """
    return [
        create_question(
            raw.question,
            raw.incorrect_answers,
            raw.correct_answer,
            random_index=random_index,
        )
        for raw in raw_questions
    ]
