# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
"""
Render Module.

Pretty-prints client results as indented, brace-delimited text using the
service's field names, e.g.::

    {
      ETag: "\\"5d41402abc4b2a76b9719d911017c592\\""
    }

Functions:
    string_value: Render a result object (or any nested value) as text.
"""
import json
from dataclasses import fields, is_dataclass
from datetime import datetime, timezone
from typing import Any

INDENT = 2

def _format_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S +0000 UTC")

def _block(entries, depth: int) -> str:
    pad = " " * (depth + INDENT)
    lines = [f"{pad}{name}: {_render(value, depth + INDENT)}" for name, value in entries]
    return "{\n" + ",\n".join(lines) + "\n" + " " * depth + "}"

def _render(value: Any, depth: int) -> str:
    if is_dataclass(value) and not isinstance(value, type):
        entries = [
            (f.metadata.get("s3", f.name), getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        ]
        return _block(entries, depth)
    if isinstance(value, dict):
        return _block(sorted(value.items()), depth)
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_render(item, depth + INDENT) for item in value) + "]"
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json.dumps(value)
    return str(value)

def string_value(value: Any) -> str:
    """
    Render a value as structured text.

    Dataclass fields that are ``None`` are left out, so an empty result
    renders as an empty block.

    Args:
        value (Any): A result dataclass, mapping, list or scalar.

    Returns:
        str: The rendered text.
    """
    return _render(value, 0)
