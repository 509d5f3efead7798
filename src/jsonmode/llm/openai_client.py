from __future__ import annotations

import os
from typing import Any, Optional, TypeVar

from jsonmode import config
from jsonmode import logger as logger_mod

from ._json import decode_json
from .base import LLMClient, LLMConfig
from .errors import LLMError, LLMValidationError
from .types import LLMMessage, TokenUsage

log = logger_mod.get_logger()

T = TypeVar("T")

JSON_OBJECT_FORMAT = {"type": "json_object"}


class OpenAIJsonMode(LLMClient):
    """OpenAI chat completions wrapper with JSON mode enabled.

    Each call sends a single system message holding the prompt. The prompt is
    expected to already describe the JSON the model should return (usually by
    embedding a schema from `jsonmode.schema.json_schema_of`).

    Network, auth and provider errors from the SDK are not caught here.
    """

    def __init__(self, config: LLMConfig, api_key: Optional[str] = None):
        self._cfg = config
        api_key = api_key or os.getenv(config.api_key_env)
        if not api_key:
            raise LLMError(f"Missing env var {config.api_key_env} for OpenAI API key")
        if not config.model:
            raise LLMError("A model identifier is required")

        try:
            from openai import OpenAI  # type: ignore
        except ImportError as e:
            raise LLMError(
                "openai SDK not installed. Add dependency 'openai' to use jsonmode.llm."
            ) from e

        kwargs: dict[str, Any] = {"api_key": api_key}
        if config.base_url:
            kwargs["base_url"] = config.base_url
        self._client = OpenAI(**kwargs)

    @property
    def model(self) -> str:
        return self._cfg.model

    def _build_request(self, prompt: str) -> dict[str, Any]:
        messages = [LLMMessage(role="system", content=prompt)]
        request: dict[str, Any] = {
            "model": self._cfg.model,
            "messages": [m.to_dict() for m in messages],
        }
        if self._cfg.json_mode:
            request["response_format"] = JSON_OBJECT_FORMAT
        return request

    def _extract_output_text(self, resp: Any) -> str:
        choices = getattr(resp, "choices", None) or []
        if not choices:
            raise LLMError("OpenAI response contained no choices")

        text = getattr(choices[0].message, "content", None)
        if not isinstance(text, str):
            raise LLMValidationError("First choice has no message content")
        return text.strip()

    def send_prompt(self, prompt: str, target_type: type[T]) -> T:
        resp = self._client.chat.completions.create(**self._build_request(prompt))

        usage = TokenUsage.from_response(resp)
        if usage is not None:
            log.debug(
                "tokens: %d (prompt=%d / completion=%d)",
                usage.total_tokens,
                usage.prompt_tokens,
                usage.completion_tokens,
            )
        else:
            log.debug("tokens: unavailable (provider returned no usage)")

        raw = self._extract_output_text(resp)
        log.debug(prompt)
        log.debug(raw)

        return decode_json(raw, target_type)


def send_prompt(api_key: str, model: str, prompt: str, target_type: type[T]) -> T:
    """Send `prompt` to OpenAI with JSON mode on and decode the reply.

    A fresh client is built for every call. Use `OpenAIJsonMode` directly to
    reuse one.
    """

    if not api_key:
        raise LLMError("An OpenAI API key is required")

    client = OpenAIJsonMode(
        LLMConfig(
            provider="openai", model=model, api_key_env=config.OPENAI_API_KEY_ENV
        ),
        api_key=api_key,
    )
    return client.send_prompt(prompt, target_type)
