from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from openai import (
    APIConnectionError,
    APIError,
    APITimeoutError,
    AsyncOpenAI,
    AuthenticationError,
    RateLimitError,
)
from openai.types.chat import ChatCompletion

from content_hoarder.core.config import settings
from content_hoarder.llm.prompts import ARTICLE_EDITOR_SYSTEM_PROMPT, ARTICLE_WRITER_SYSTEM_PROMPT
from content_hoarder.storage.base import ConfigContext

logger = logging.getLogger(__name__)

OPENAI_API_KEY_NAME = "OPENAI_API_KEY"


class LLMServiceError(Exception):
    """Base error raised when the LLM service cannot fulfill a request."""

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class LLMConfigurationError(LLMServiceError):
    """No credential available for the LLM service."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_not_configured")


class LLMUnavailableError(LLMServiceError):
    """LLM is unavailable (timeout, rate limit, or upstream outage)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_unavailable")


class LLMAuthenticationError(LLMServiceError):
    """LLM authentication failed (service credentials invalid)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_auth_failed")


class LLMInvalidResponseError(LLMServiceError):
    """LLM returned an invalid or unexpected response."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "llm_response_invalid")


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def write_article(self, prompt: str) -> str:
        """Write a new article from a synthesis prompt. May return an empty string."""
        raise NotImplementedError

    @abstractmethod
    async def revise_article(self, prompt: str) -> str:
        """Revise an article from a revision prompt. May return an empty string."""
        raise NotImplementedError


class OpenAIClient(LLMClient):
    """OpenAI implementation of LLM client."""

    def __init__(
        self, api_key: str, model: str | None = None, max_tokens: int | None = None
    ) -> None:
        """Initialize OpenAI client."""
        self.client = AsyncOpenAI(api_key=api_key)
        self.model = model or settings.openai_model
        self.max_tokens = max_tokens or settings.openai_max_tokens

    @classmethod
    def from_config(cls, config: ConfigContext | None = None) -> OpenAIClient:
        """Build a client from the host config, falling back to application settings.

        Raises:
            LLMConfigurationError: If no API key is available from either source.
        """
        api_key = (config.get(OPENAI_API_KEY_NAME) if config else None) or settings.openai_api_key
        if not api_key:
            raise LLMConfigurationError(f"{OPENAI_API_KEY_NAME} not configured")
        return cls(api_key=api_key)

    def _handle_errors(self, error: Exception) -> LLMServiceError:
        """Log error with appropriate message based on error type."""
        if isinstance(error, APITimeoutError):
            logger.error(f"OpenAI API request timed out. Error: {error}")
            return LLMUnavailableError("LLM request timed out. Try again.")
        elif isinstance(error, APIConnectionError):
            logger.error(f"OpenAI API connection failed. Error: {error}")
            return LLMUnavailableError("LLM service unreachable. Try again shortly.")
        elif isinstance(error, RateLimitError):
            logger.error(f"OpenAI API rate limit exceeded. Error: {error}")
            return LLMUnavailableError("LLM rate limit exceeded. Try again later.")
        elif isinstance(error, AuthenticationError):
            logger.error(f"OpenAI API authentication failed. Error: {error}")
            return LLMAuthenticationError("LLM authentication failed.")
        elif isinstance(error, APIError):
            logger.error(f"OpenAI API error. Error: {error}")
            return LLMUnavailableError("LLM service error. Try again later.")
        elif isinstance(error, (IndexError, AttributeError)):
            logger.error(f"Unexpected response structure from OpenAI. Error: {error}")
            return LLMInvalidResponseError("LLM returned an unexpected response.")
        else:
            logger.error(f"Unexpected error generating article. Error: {error}")
            return LLMServiceError("LLM request failed. Try again later.", "llm_error")

    async def _complete(self, system_prompt: str, prompt: str) -> str:
        try:
            response: ChatCompletion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_tokens,
            )
            return response.choices[0].message.content or ""
        except Exception as e:
            raise self._handle_errors(e) from e

    async def write_article(self, prompt: str) -> str:
        return await self._complete(ARTICLE_WRITER_SYSTEM_PROMPT, prompt)

    async def revise_article(self, prompt: str) -> str:
        return await self._complete(ARTICLE_EDITOR_SYSTEM_PROMPT, prompt)
