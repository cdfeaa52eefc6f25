from __future__ import annotations

import json
from typing import Mapping


def canonicalize_json(value: object) -> object:
    if isinstance(value, Mapping):
        # Lexical mapping-key text defines canonical JSON shape.
        ordered_items = sorted(
            ((str(key), canonicalize_json(item_value)) for key, item_value in value.items()),
            key=lambda item: item[0],
        )
        return {key: item_value for key, item_value in ordered_items}
    if isinstance(value, list):
        return [canonicalize_json(item) for item in value]
    return value


def load_json_object_text(text: str) -> dict[str, object]:
    """Parse ``text`` as a JSON object.

    Raises ``ValueError`` for invalid JSON or a non-object top level.
    """
    payload = json.loads(text)
    if not isinstance(payload, Mapping):
        raise ValueError(f"expected a JSON object, got {type(payload).__name__}")
    return dict(payload)


def dump_json_pretty(payload: object) -> str:
    return json.dumps(
        canonicalize_json(payload),
        indent=2,
        sort_keys=False,
        ensure_ascii=False,
    )
