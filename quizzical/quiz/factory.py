"""Answer and question factories."""

import html
import random
from collections.abc import Sequence
from typing import Callable

from quizzical.models.quiz import Answer, Question

# Takes the number of incorrect answers n, returns an index in [0, n].
RandomIndex = Callable[[int], int]


def default_random_index(n: int) -> int:
    """Pick the correct answer's slot uniformly from 0..n inclusive."""
    return random.randint(0, n)


def create_answer(text: str, is_correct: bool = False) -> Answer:
    """
    Create an unselected answer with decoded text and a fresh id.

    Args:
        text: Raw answer text, possibly containing HTML entities
        is_correct: Whether this answer is the right one

    Returns:
        New Answer
    """
    return Answer(text=html.unescape(text), is_correct=is_correct)


def create_question(
    text: str,
    incorrect_answers: Sequence[str],
    correct_answer: str,
    random_index: RandomIndex = default_random_index,
) -> Question:
    """
    Create a question with the correct answer inserted at a random position.

    The position is drawn independently for every call, so two questions
    never share a shuffle order.

    Args:
        text: Raw question text
        incorrect_answers: Raw texts of the wrong answers, in source order
        correct_answer: Raw text of the right answer
        random_index: Source of the insertion index

    Returns:
        New Question with len(incorrect_answers) + 1 answers
    """
    answers = [create_answer(answer) for answer in incorrect_answers]
    position = random_index(len(answers))
    answers.insert(position, create_answer(correct_answer, is_correct=True))

    return Question(text=html.unescape(text), answers=answers)
