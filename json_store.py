from __future__ import annotations

import json
from typing import Mapping

from pydantic import TypeAdapter

# On-disk store document: { "<key>": "<value>", ... }
STORE_DOCUMENT = TypeAdapter(dict[str, str])


def decode_document(raw: str) -> dict[str, str]:
    """
    Decode a persisted store document.

    Empty (or whitespace-only) input yields an empty dict. Anything else must be a
    JSON object mapping strings to strings, otherwise pydantic.ValidationError is raised.
    """
    if not raw.strip():
        return {}
    return STORE_DOCUMENT.validate_json(raw, strict=True)


def encode_document(doc: Mapping[str, str]) -> str:
    """
    Encode the full store map as compact JSON with sorted keys and a trailing newline.
    """
    return json.dumps(dict(doc), ensure_ascii=False, sort_keys=True, separators=(",", ":")) + "\n"
