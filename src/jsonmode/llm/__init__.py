"""Send a prompt to an OpenAI chat model in JSON mode and decode the reply.

Design goals:
- Keep the provider SDK isolated behind a small client.
- One system message per call, JSON response format forced.
- Decode the reply into a caller-chosen type; never repair or default.
"""

from ._json import decode_json, parse_json
from .base import LLMClient, LLMConfig
from .errors import LLMError, LLMValidationError
from .factory import build_llm
from .openai_client import OpenAIJsonMode, send_prompt
from .types import LLMMessage, TokenUsage

__all__ = [
    "LLMClient",
    "LLMConfig",
    "LLMError",
    "LLMMessage",
    "LLMValidationError",
    "OpenAIJsonMode",
    "TokenUsage",
    "build_llm",
    "decode_json",
    "parse_json",
    "send_prompt",
]
