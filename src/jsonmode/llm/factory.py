from __future__ import annotations

from typing import Optional

from jsonmode import config

from .base import LLMClient, LLMConfig
from .errors import LLMError
from .openai_client import OpenAIJsonMode


def build_llm(*, provider: str = "openai", model: Optional[str] = None) -> LLMClient:
    """Factory for provider clients.

    Providers:
    - openai (also any OpenAI-compatible endpoint via OPENAI_BASE_URL)

    The API key is read from the environment.
    """

    p = provider.lower().strip()
    if p == "openai":
        return OpenAIJsonMode(
            LLMConfig(
                provider="openai",
                model=model or config.DEFAULT_MODEL,
                api_key_env=config.OPENAI_API_KEY_ENV,
                base_url=config.OPENAI_BASE_URL,
            )
        )

    raise LLMError(f"Unknown LLM provider: {provider}")
