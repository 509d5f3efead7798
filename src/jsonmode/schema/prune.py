"""Remove schema identifiers that nothing references.

Generated schemas carry an `$id` on every definition. Most are never the
target of a `$ref`, and in a prompt every one of them costs tokens. Pruning
runs in two passes over the same tree:

1. collect every `$ref` string, and every `discriminator.mapping` target,
   in the tree (`find_used_ids`);
2. drop every `$id` that is not in that set (`remove_ids`).

The first pass must finish before the second starts, since a reference to a
node may sit anywhere in the tree. `$ref` values are never touched, so every
reference stays resolvable.
"""

from __future__ import annotations

from typing import Any, Iterator

ID_KEY = "$id"
REF_KEY = "$ref"
DISCRIMINATOR_KEY = "discriminator"
MAPPING_KEY = "mapping"

# Keywords whose value is a single subschema or a list of subschemas.
SUBSCHEMA_KEYS = ("items", "additionalProperties", "not")
SUBSCHEMA_LIST_KEYS = ("prefixItems", "anyOf", "oneOf", "allOf")
# Keywords whose value maps names to subschemas.
SUBSCHEMA_MAP_KEYS = ("properties", "patternProperties")


def _children(schema: dict[str, Any]) -> Iterator[dict[str, Any]]:
    for key in SUBSCHEMA_MAP_KEYS:
        sub = schema.get(key)
        if isinstance(sub, dict):
            yield from (v for v in sub.values() if isinstance(v, dict))

    for key in SUBSCHEMA_KEYS:
        sub = schema.get(key)
        if isinstance(sub, dict):
            yield sub
        elif isinstance(sub, list):
            # draft-04 tuple form: "items": [schema, schema, ...]
            yield from (s for s in sub if isinstance(s, dict))

    for key in SUBSCHEMA_LIST_KEYS:
        sub = schema.get(key)
        if isinstance(sub, list):
            yield from (s for s in sub if isinstance(s, dict))


def find_used_ids(used_ids: set[str], schema: dict[str, Any]) -> None:
    """Add every reference found in `schema` (recursively) to `used_ids`."""
    ref = schema.get(REF_KEY)
    if ref is not None:
        used_ids.add(ref)
    discriminator = schema.get(DISCRIMINATOR_KEY)
    if isinstance(discriminator, dict):
        mapping = discriminator.get(MAPPING_KEY) or {}
        used_ids.update(v for v in mapping.values() if isinstance(v, str))
    for child in _children(schema):
        find_used_ids(used_ids, child)


def remove_ids(used_ids: set[str], schema: dict[str, Any]) -> None:
    """Drop every `$id` in `schema` (recursively) that is not in `used_ids`."""
    if ID_KEY in schema and schema[ID_KEY] not in used_ids:
        del schema[ID_KEY]
    for child in _children(schema):
        remove_ids(used_ids, child)


def prune_ids(schema: dict[str, Any]) -> dict[str, Any]:
    """Strip unreferenced identifiers from `schema` in place and return it."""
    used_ids: set[str] = set()
    find_used_ids(used_ids, schema)
    remove_ids(used_ids, schema)
    return schema
