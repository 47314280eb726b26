"""Quiz Lifecycle Controller - Owns the quiz session and its transitions."""

import logging
from typing import Protocol

from quizzical.errors import NoResults, QuizError
from quizzical.models.quiz import Question, QuizPhase, QuizSnapshot, RawQuestion
from quizzical.quiz.builder import build_questions
from quizzical.quiz.factory import RandomIndex, default_random_index
from quizzical.quiz.selection import all_answered, count_correct, select_answer

logger = logging.getLogger(__name__)

PASS_SCORE = 3


class QuestionSource(Protocol):
    """Anything that can fetch one quiz worth of raw questions."""

    async def fetch_questions(self) -> list[RawQuestion]: ...


class QuizController:
    """
    State machine for a single quiz session.

    Phases run Empty -> Loading -> Active -> Results -> Empty. A failed fetch
    returns to Empty with ``error`` set. Transitions that are not valid in the
    current phase are rejected: they return False and change nothing.
    """

    def __init__(
        self,
        source: QuestionSource,
        random_index: RandomIndex = default_random_index,
        pass_score: int = PASS_SCORE,
    ):
        self._source = source
        self._random_index = random_index
        self.pass_score = pass_score

        self._questions: list[Question] = []
        self._show_results = False
        self._is_loading = False
        self._error: str | None = None
        self._has_finished = False

        # Bumped on every start and on close; a fetch that completes under a
        # stale generation is discarded.
        self._generation = 0
        self._closed = False

    @property
    def phase(self) -> QuizPhase:
        """Get the current lifecycle phase."""
        if self._is_loading:
            return QuizPhase.LOADING
        if not self._questions:
            return QuizPhase.EMPTY
        if self._show_results:
            return QuizPhase.RESULTS
        return QuizPhase.ACTIVE

    @property
    def questions(self) -> list[Question]:
        return [q.model_copy(deep=True) for q in self._questions]

    @property
    def show_results(self) -> bool:
        return self._show_results

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def has_finished(self) -> bool:
        return self._has_finished

    @property
    def all_answered(self) -> bool:
        """Whether every question has a selected answer, derived from questions."""
        return all_answered(self._questions)

    @property
    def passed(self) -> bool:
        """Whether results are shown and the score reaches the pass mark."""
        return self.phase is QuizPhase.RESULTS and self.score() >= self.pass_score

    @property
    def closed(self) -> bool:
        return self._closed

    def score(self) -> int:
        """Count the questions answered correctly."""
        return count_correct(self._questions)

    async def start(self) -> bool:
        """
        Fetch and install a new quiz.

        Only valid from Empty. The fetch is a single attempt; on failure the
        session returns to Empty with an error message and the caller may
        start again.

        Returns:
            True if the transition was accepted
        """
        if self._closed or self.phase is not QuizPhase.EMPTY:
            logger.debug("start() rejected in phase %s", self.phase.value)
            return False

        self._generation += 1
        generation = self._generation
        self._error = None
        self._is_loading = True
        logger.info("Fetching a new quiz")

        try:
            raw_questions = await self._source.fetch_questions()
            if not raw_questions:
                raise NoResults()
            questions = build_questions(raw_questions, random_index=self._random_index)
        except QuizError as e:
            if self._is_stale(generation):
                logger.debug("Discarding failure from a torn-down session: %s", e)
                return True
            logger.warning("Quiz could not be loaded: %s", e)
            self._error = str(e)
            self._is_loading = False
            return True
        except Exception:
            if not self._is_stale(generation):
                self._is_loading = False
            raise

        if self._is_stale(generation):
            logger.debug("Discarding quiz that arrived after teardown")
            return True

        self._questions = questions
        self._is_loading = False
        logger.info("Quiz ready with %d questions", len(questions))
        return True

    def select_answer(self, question_id: str, answer_id: str) -> bool:
        """
        Select an answer for a question while the quiz is active.

        Returns:
            True if the transition was accepted
        """
        if self._closed or self.phase is not QuizPhase.ACTIVE:
            logger.debug("select_answer() rejected in phase %s", self.phase.value)
            return False

        self._questions = select_answer(self._questions, question_id, answer_id)
        return True

    def finish(self) -> bool:
        """
        Reveal results once every question is answered.

        Returns:
            True if the transition was accepted
        """
        if self._closed or self.phase is not QuizPhase.ACTIVE:
            logger.debug("finish() rejected in phase %s", self.phase.value)
            return False
        if not self.all_answered:
            logger.debug("finish() rejected: not every question is answered")
            return False

        self._show_results = True
        self._has_finished = True
        logger.info("Quiz finished with score %d/%d", self.score(), len(self._questions))
        return True

    def restart(self) -> bool:
        """
        Clear the finished quiz and return to Empty.

        Returns:
            True if the transition was accepted
        """
        if self._closed or self.phase is not QuizPhase.RESULTS:
            logger.debug("restart() rejected in phase %s", self.phase.value)
            return False

        self._questions = []
        self._show_results = False
        self._has_finished = False
        self._error = None
        logger.info("Quiz cleared")
        return True

    def primary_action(self) -> bool:
        """Finish the quiz, or restart it if it has already been finished."""
        if self._has_finished:
            return self.restart()
        return self.finish()

    def close(self) -> None:
        """Tear the session down; late fetch results are dropped."""
        self._closed = True
        self._generation += 1

    def snapshot(self) -> QuizSnapshot:
        """Get a read-only copy of the current session state."""
        return QuizSnapshot(
            phase=self.phase,
            questions=self.questions,
            show_results=self._show_results,
            all_answered=self.all_answered,
            is_loading=self._is_loading,
            error=self._error,
            score=self.score(),
            passed=self.passed,
            has_finished=self._has_finished,
        )

    def _is_stale(self, generation: int) -> bool:
        return self._closed or generation != self._generation
