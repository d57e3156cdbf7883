# src/dev_helper/llm/client.py

from __future__ import annotations

import logging
from typing import Any

import httpx
import openai
from openai import OpenAI

from ..core.errors import RemoteCallError
from ..remote.http import make_timeout

logger = logging.getLogger(__name__)


def _is_auth_error(exc: Exception) -> bool:
    return isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError))


def _is_rate_limit_error(exc: Exception) -> bool:
    return isinstance(exc, openai.RateLimitError)


def _is_connection_error(exc: Exception) -> bool:
    # APITimeoutError is a subclass of APIConnectionError.
    return isinstance(exc, openai.APIConnectionError)


def friendly_llm_error_message(err: Exception) -> str:
    if _is_auth_error(err):
        return "Chat API rejected the API key. Check ~/.helper-ai.cfg or enter a new key."
    if _is_rate_limit_error(err):
        return "Chat API is rate-limited (HTTP 429). Try again later."
    if isinstance(err, openai.APITimeoutError):
        return "Chat API timed out."
    if _is_connection_error(err):
        return f"Could not reach the chat API: {err}"
    if isinstance(err, openai.APIStatusError):
        return f"Chat API returned HTTP {err.status_code}."
    return str(err).strip() or "Chat API error."


class OpenAIChatClient:
    """
    One-shot chat completion through the OpenAI SDK.

    - The API key is passed per call (it is prompted for / loaded by the handler).
    - SDK retries are disabled: every question is exactly one request.
    """

    def __init__(
        self,
        *,
        base_url: str,
        model: str,
        connect_timeout: float = 5.0,
        read_timeout: float = 60.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url
        self._model = model
        self._timeout = make_timeout(connect_timeout, read_timeout)
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Any) -> "OpenAIChatClient":
        return cls(
            base_url=settings.openai_base_url,
            model=settings.openai_model,
            connect_timeout=float(getattr(settings, "http_connect_timeout", 5.0)),
            read_timeout=float(getattr(settings, "http_read_timeout", 60.0)),
        )

    def _make_client(self, api_key: str) -> OpenAI:
        return OpenAI(
            base_url=self._base_url,
            api_key=api_key,
            timeout=self._timeout,
            max_retries=0,
            http_client=self._http_client,
        )

    def ask(self, api_key: str, question: str) -> str:
        client = self._make_client(api_key)
        logger.info("LLM: asking model=%s", self._model)

        try:
            completion = client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": question}],
            )
        except openai.OpenAIError as e:
            status = getattr(e, "status_code", None)
            logger.info("LLM: request failed (%s, status=%s)", e.__class__.__name__, status)
            raise RemoteCallError(friendly_llm_error_message(e), status_code=status) from e

        try:
            content = completion.choices[0].message.content
        except (IndexError, AttributeError) as e:
            raise RemoteCallError("Chat API returned no choices.") from e

        if not content:
            raise RemoteCallError("Chat API returned an empty answer.")
        return content
