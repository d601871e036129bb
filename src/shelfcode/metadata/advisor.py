# ABOUTME: Genre advisor that asks a chat-completion model to pick a vocabulary genre.
# ABOUTME: The model's answer is mapped onto a theme code, defaulting to GEN.

import logging
from typing import Any

from shelfcode.codes.vocabulary import DEFAULT_THEME_CODE, GENRE_MAPPINGS, genre_names
from shelfcode.metadata.http import HttpClient, MetadataFetchError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"

_SYSTEM_PROMPT = "You are a helpful book classification assistant."
_TEMPERATURE = 0.3
_MAX_TOKENS = 10


class GenreAdvisorError(Exception):
    """Raised when the genre advisor cannot get an answer from the model."""


def build_genre_prompt(isbn: str) -> str:
    """Build the user prompt listing every vocabulary genre for the model to choose from."""
    return (
        f"Given a book with ISBN {isbn}, "
        f"determine the primary genre from this list: {', '.join(genre_names())}. "
        "Return only the primary genre code as a single word or phrase, nothing else."
    )


def theme_for_answer(answer: str) -> str:
    """Map the model's genre answer to a theme code; unrecognized answers give GEN."""
    return GENRE_MAPPINGS.get(answer.strip(), DEFAULT_THEME_CODE)


class GenreAdvisor:
    """Suggests a theme code for an ISBN using an OpenAI-compatible chat API."""

    def __init__(
        self,
        http_client: HttpClient,
        api_key: str,
        *,
        model: str = DEFAULT_MODEL,
        endpoint: str = CHAT_COMPLETIONS_URL,
    ) -> None:
        self._http = http_client
        self._api_key = api_key
        self._model = model
        self._endpoint = endpoint

    def suggest_theme(self, isbn: str) -> str:
        """Ask the model for the primary genre of `isbn` and return its theme code.

        Raises:
            GenreAdvisorError: If the request fails or the response has no answer.
        """
        answer = self.ask(isbn)
        theme = theme_for_answer(answer)
        logger.debug("Advisor answered %r for %s -> %s", answer, isbn, theme)
        return theme

    def ask(self, isbn: str) -> str:
        """Return the model's raw genre answer for `isbn`."""
        payload: dict[str, Any] = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user", "content": build_genre_prompt(isbn)},
            ],
            "temperature": _TEMPERATURE,
            "max_tokens": _MAX_TOKENS,
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            data = self._http.post(self._endpoint, payload, headers=headers)
        except MetadataFetchError as exc:
            raise GenreAdvisorError(f"Genre request failed for ISBN {isbn}: {exc}") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise GenreAdvisorError(f"Unexpected genre response for ISBN {isbn}") from exc
        if not isinstance(content, str):
            raise GenreAdvisorError(f"Unexpected genre response for ISBN {isbn}")
        return content.strip()
