"""
Shell-style rendering of command documents.

Command documents are ordered mappings of field name to value. They are
rendered in the compact notation used throughout diagnostic logs::

    { createIndexes: "myColl", indexes: [ { key: { a: 1 } } ] }
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

EMPTY_DOCUMENT = "{}"
EMPTY_ARRAY = "[]"


def format_value(value: Any) -> str:
    """Render a single document value, recursing into nested structures."""
    # bool before int: bool is an int subclass
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, datetime):
        return f"new Date({_epoch_millis(value)})"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"BinData(0, {bytes(value).hex().upper()})"
    if isinstance(value, Mapping):
        return format_document(value)
    if isinstance(value, Sequence):
        return format_array(value)
    return repr(value)


def format_array(values: Sequence[Any]) -> str:
    """Render a sequence as ``[ a, b ]``."""
    if not values:
        return EMPTY_ARRAY
    return "[ " + ", ".join(format_value(v) for v in values) + " ]"


def format_document(document: Mapping[str, Any]) -> str:
    """Render a mapping as ``{ name: value, ... }`` preserving field order."""
    if not document:
        return EMPTY_DOCUMENT
    return format_fields((name, format_value(value)) for name, value in document.items())


def format_fields(rendered: Iterable[tuple[str, str]]) -> str:
    """Join already-rendered ``(name, text)`` pairs into a document body."""
    parts = [f"{name}: {text}" for name, text in rendered]
    if not parts:
        return EMPTY_DOCUMENT
    return "{ " + ", ".join(parts) + " }"


def _epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)
