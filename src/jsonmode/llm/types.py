from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class TokenUsage:
    """Token counters reported by the provider for one completion."""

    total_tokens: int
    prompt_tokens: int
    completion_tokens: int

    @classmethod
    def from_response(cls, resp: Any) -> TokenUsage | None:
        usage = getattr(resp, "usage", None)
        if usage is None:
            return None
        return cls(
            total_tokens=usage.total_tokens or 0,
            prompt_tokens=usage.prompt_tokens or 0,
            completion_tokens=usage.completion_tokens or 0,
        )
