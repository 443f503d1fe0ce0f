"""
Chat model invocation with timeout and bounded retry.

A call exceeding the timeout raises GenerationTimeoutError (retryable);
network failures and provider-side 5xx or throttling responses are retried
too; any other provider failure is a GenerationError and is not retried.

Dependencies: tenacity, langchain_core
System role: Text-generation provider call policy
"""

import asyncio
import logging
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.prompt_values import PromptValue
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from askpdf.core.exceptions import AskPdfException, GenerationError, GenerationTimeoutError
from askpdf.core.retry_policy import is_transient_upstream_error

logger = logging.getLogger(__name__)


def normalize_content(content: Any) -> str:
    """
    Normalize chat model content to text.

    Providers return either a plain string or a list of content parts
    (strings or dicts with a 'text' key).
    """
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str)
            else (str(item.get("text", "")) if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class AnswerGenerator:
    """Invokes the chat model under the configured timeout and retry policy."""

    def __init__(
        self,
        model: BaseChatModel,
        timeout_seconds: float = 60.0,
        max_attempts: int = 3,
        backoff_seconds: float = 1.0,
    ) -> None:
        self._model = model
        self._timeout = timeout_seconds
        self._max_attempts = max_attempts
        self._backoff = backoff_seconds

    async def _invoke_once(self, prompt: PromptValue) -> str:
        try:
            response = await asyncio.wait_for(self._model.ainvoke(prompt), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise GenerationTimeoutError(
                f"Generation exceeded {self._timeout}s timeout",
                {"timeout_seconds": self._timeout},
            ) from e
        except AskPdfException:
            raise
        except Exception as e:
            if is_transient_upstream_error(e):
                raise
            raise GenerationError(f"Generation provider failed: {e}") from e
        return normalize_content(response.content)

    async def generate(self, prompt: PromptValue) -> str:
        """
        Generate an answer for a rendered prompt.

        Raises:
            GenerationTimeoutError: When every attempt timed out
            GenerationError: On provider rejection or exhausted connection retries
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception(is_transient_upstream_error),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff, max=30),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:generate - Retry {retry_state.attempt_number}/{self._max_attempts} "
                f"after {type(retry_state.outcome.exception()).__name__}"
            ),
            reraise=True,
        )
        try:
            async for attempt in retrying:
                with attempt:
                    return await self._invoke_once(prompt)
        except AskPdfException:
            raise
        except Exception as e:
            raise GenerationError(f"Generation provider unreachable: {e}") from e
        raise GenerationError("Generation produced no result")
