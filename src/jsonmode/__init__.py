"""JSON-mode prompting helpers for OpenAI chat models.

- `jsonmode.llm` sends a prompt with JSON mode enabled and decodes the reply.
- `jsonmode.schema` generates compact JSON Schemas to embed in prompts.
"""

from .llm import send_prompt
from .prompts import structured_prompt
from .schema import json_schema_of

__all__ = ["json_schema_of", "send_prompt", "structured_prompt"]
