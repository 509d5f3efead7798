from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class LLMConfig:
    provider: str
    model: str
    api_key_env: str
    base_url: Optional[str] = None
    # Providers without a strict JSON response mode rely on the prompt alone.
    json_mode: bool = True


class LLMClient(Protocol):
    """Small interface for "prompt -> typed JSON result" tasks."""

    def send_prompt(self, prompt: str, target_type: type[T]) -> T:
        raise NotImplementedError
