from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import TypeAdapter

from jsonmode import config
from jsonmode import logger as logger_mod

from .prune import (
    DISCRIMINATOR_KEY,
    ID_KEY,
    MAPPING_KEY,
    REF_KEY,
    SUBSCHEMA_KEYS,
    SUBSCHEMA_LIST_KEYS,
    SUBSCHEMA_MAP_KEYS,
    prune_ids,
)

log = logger_mod.get_logger()

DEFS_KEY = "$defs"
LOCAL_REF_PREFIX = f"#/{DEFS_KEY}/"


def schema_id(definition_name: str) -> str:
    return f"{config.SCHEMA_ID_PREFIX}{definition_name}"


def _local_name(ref: Any) -> Optional[str]:
    if isinstance(ref, str) and ref.startswith(LOCAL_REF_PREFIX):
        return ref[len(LOCAL_REF_PREFIX):]
    return None


def _inline(node: Any, defs: dict[str, Any], seen: set[str]) -> Any:
    """Rewrite a pydantic schema node into the identifier-based form.

    The first use of a `$defs` entry is expanded in place and carries `$id`.
    Every later use, recursive or not, becomes `{"$ref": <id>}`. `seen` is
    shared by the whole walk, so each definition is written out once.
    """
    if not isinstance(node, dict):
        return node

    name = _local_name(node.get(REF_KEY))
    if name is not None:
        siblings = _inline(
            {k: v for k, v in node.items() if k != REF_KEY}, defs, seen
        )
        if name in seen:
            return {REF_KEY: schema_id(name), **siblings}
        seen.add(name)
        expanded = _inline(defs[name], defs, seen)
        return {ID_KEY: schema_id(name), **expanded, **siblings}

    out: dict[str, Any] = {}
    for key, value in node.items():
        if key == DEFS_KEY:
            continue
        if key in SUBSCHEMA_MAP_KEYS and isinstance(value, dict):
            out[key] = {k: _inline(v, defs, seen) for k, v in value.items()}
        elif key in SUBSCHEMA_KEYS and isinstance(value, dict):
            out[key] = _inline(value, defs, seen)
        elif key in SUBSCHEMA_KEYS + SUBSCHEMA_LIST_KEYS and isinstance(value, list):
            out[key] = [_inline(v, defs, seen) for v in value]
        elif key == DISCRIMINATOR_KEY and isinstance(value, dict):
            out[key] = _rewrite_mapping(value)
        else:
            out[key] = value
    return out


def _rewrite_mapping(discriminator: dict[str, Any]) -> dict[str, Any]:
    mapping = discriminator.get(MAPPING_KEY)
    if not isinstance(mapping, dict):
        return discriminator
    rewritten = {}
    for tag, ref in mapping.items():
        name = _local_name(ref)
        rewritten[tag] = schema_id(name) if name is not None else ref
    return {**discriminator, MAPPING_KEY: rewritten}


def generate_schema(target_type: Any) -> dict[str, Any]:
    """Return the full (unpruned) JSON Schema tree for `target_type`.

    Every definition is written out once, at its first use, with an `$id`;
    later uses refer to it with `$ref`. Errors from pydantic (unsupported
    types) propagate.
    """
    raw = TypeAdapter(target_type).json_schema()
    defs = raw.get(DEFS_KEY, {})
    schema = _inline(raw, defs, set())

    if ID_KEY not in schema and schema.get("type") == "object" and "title" in schema:
        schema = {ID_KEY: schema_id(schema["title"]), **schema}
    return schema


def json_schema_of(target_type: Any) -> str:
    """Return the JSON Schema of `target_type` as a compact string.

    By default the generated schema carries an identifier for every object.
    They are long and, when unused, only cost tokens, so every identifier that
    no `$ref` points at is removed.
    """
    schema = prune_ids(generate_schema(target_type))
    text = json.dumps(schema, ensure_ascii=False, separators=(",", ":"))
    name = getattr(target_type, "__name__", target_type)
    log.debug(f"json_schema_of({name}): {len(text)} chars")
    return text
