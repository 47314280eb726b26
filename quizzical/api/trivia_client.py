"""Client for the Open Trivia Database question endpoint."""

import logging

import httpx
from pydantic import ValidationError

from quizzical.config.settings import get_settings
from quizzical.errors import FetchFailed, NoResults
from quizzical.models.quiz import RawQuestion, TriviaResponse

logger = logging.getLogger(__name__)

# Fixed quiz shape: five easy general knowledge multiple choice questions
QUESTION_AMOUNT = 5
CATEGORY = 9
DIFFICULTY = "easy"
QUESTION_TYPE = "multiple"

QUERY_PARAMS = {
    "amount": QUESTION_AMOUNT,
    "category": CATEGORY,
    "difficulty": DIFFICULTY,
    "type": QUESTION_TYPE,
}


class TriviaClient:
    """Fetches one quiz worth of questions per call, in a single attempt."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = base_url or settings.trivia_api_url
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._transport = transport

    async def fetch_questions(self) -> list[RawQuestion]:
        """
        Fetch the raw question records for a new quiz.

        Returns:
            List of RawQuestion records

        Raises:
            FetchFailed: On transport errors, timeouts, non-2xx status or bad JSON
            NoResults: When the API reports a non-zero response code or no results
        """
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.get(self.base_url, params=QUERY_PARAMS)
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPError as e:
                logger.warning("Trivia request failed: %s", e)
                raise FetchFailed() from e
            except ValueError as e:
                logger.warning("Trivia response was not valid JSON: %s", e)
                raise FetchFailed() from e

        return parse_response(payload)


def parse_response(payload: object) -> list[RawQuestion]:
    """
    Validate a decoded trivia API payload and return its question records.

    Args:
        payload: Decoded JSON body

    Returns:
        List of RawQuestion records

    Raises:
        NoResults: When the payload is malformed, reports failure or is empty
    """
    try:
        data = TriviaResponse.model_validate(payload)
    except ValidationError as e:
        logger.warning("Trivia response did not match the expected shape: %s", e)
        raise NoResults() from e

    if data.response_code != 0:
        logger.warning("Trivia API returned response_code=%d", data.response_code)
        raise NoResults()

    if not data.results:
        logger.warning("Trivia API returned no questions")
        raise NoResults()

    return data.results
