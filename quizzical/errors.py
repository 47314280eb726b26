"""Errors raised while loading a quiz."""


class QuizError(Exception):
    """Base class for quiz loading failures.

    The message is the short, user-visible description stored on the session.
    """

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class FetchFailed(QuizError):
    """Network or HTTP level failure talking to the trivia API."""

    default_message = "Failed to fetch quiz"


class NoResults(QuizError):
    """The trivia API answered but could not supply the requested questions."""

    default_message = "No results found"
