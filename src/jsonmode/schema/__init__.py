"""JSON Schema generation for prompts, with unused identifiers pruned."""

from .generator import generate_schema, json_schema_of, schema_id
from .prune import find_used_ids, prune_ids, remove_ids

__all__ = [
    "find_used_ids",
    "generate_schema",
    "json_schema_of",
    "prune_ids",
    "remove_ids",
    "schema_id",
]
