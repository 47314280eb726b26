"""Selection Engine - Single-choice answer selection over a question list."""

from collections.abc import Sequence

from quizzical.models.quiz import Question


def select_answer(
    questions: Sequence[Question], question_id: str, answer_id: str
) -> list[Question]:
    """
    Select one answer in one question, clearing its siblings.

    Selecting an answer that is already selected keeps it selected. Unknown
    ids leave every question unchanged. Questions other than the target are
    returned as-is.

    Args:
        questions: Current question list
        question_id: Id of the question being answered
        answer_id: Id of the chosen answer

    Returns:
        New question list
    """
    updated = []
    for question in questions:
        if question.id != question_id or not any(
            a.id == answer_id for a in question.answers
        ):
            updated.append(question)
            continue

        answers = [
            answer.model_copy(update={"is_selected": answer.id == answer_id})
            for answer in question.answers
        ]
        updated.append(question.model_copy(update={"answers": answers}))

    return updated


def all_answered(questions: Sequence[Question]) -> bool:
    """Whether every question has a selected answer."""
    return all(q.is_answered for q in questions)


def count_correct(questions: Sequence[Question]) -> int:
    """Count questions whose selected answer is the correct one."""
    return sum(1 for q in questions if q.is_answered_correctly)
