"""
Text encoding for list-valued columns.

Lists (profile languages/interests, resume skills/projects/..., quiz options)
are stored as JSON-array text. The empty list is stored as "[]", never as
NULL, and decodes back to [].
"""

import json
from typing import Any, Iterable, Optional


def encode_list(values: Optional[Iterable[Any]]) -> str:
    items = []
    for v in values or []:
        # pydantic models (e.g. resume projects) are stored as plain dicts
        items.append(v.model_dump() if hasattr(v, "model_dump") else v)
    return json.dumps(items, ensure_ascii=False)


def decode_list(raw: Any) -> list:
    if raw is None or raw == "":
        return []
    if isinstance(raw, list):
        return raw
    value = json.loads(raw)
    if not isinstance(value, list):
        raise ValueError(f"Expected a JSON array, got {type(value).__name__}")
    return value
