from content_hoarder.llm.client import (
    LLMAuthenticationError,
    LLMClient,
    LLMConfigurationError,
    LLMInvalidResponseError,
    LLMServiceError,
    LLMUnavailableError,
    OpenAIClient,
)

__all__ = [
    "LLMClient",
    "OpenAIClient",
    "LLMServiceError",
    "LLMConfigurationError",
    "LLMUnavailableError",
    "LLMAuthenticationError",
    "LLMInvalidResponseError",
]
