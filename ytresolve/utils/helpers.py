"""
General utility functions for walking loosely typed API JSON and
HLS attribute lists.
"""

import re
from typing import Any


def traverse_obj(obj: Any, *paths: Any, default: Any = None) -> Any:
    """
    Traverse nested dicts/lists safely.

    Usage:
        traverse_obj(data, 'key1')
        traverse_obj(data, ('key1', 'key2'), ('alt_key1', 0, 'alt_key2'))
    """
    for path in paths:
        if isinstance(path, (list, tuple)):
            result = obj
            for key in path:
                if result is None:
                    break
                if isinstance(result, dict):
                    result = result.get(key)
                elif isinstance(result, (list, tuple)):
                    try:
                        result = result[key]
                    except (IndexError, TypeError):
                        result = None
                else:
                    result = None
            if result is not None:
                return result
        else:
            if isinstance(obj, dict) and path in obj:
                return obj[path]
    return default


def int_or_none(v: Any, scale: int = 1) -> int | None:
    """Convert value to int or return None."""
    if v is None:
        return None
    try:
        return int(v) // scale
    except (ValueError, TypeError):
        return None


def str_or_none(v: Any) -> str | None:
    """Convert value to string or return None."""
    if v is None:
        return None
    result = str(v).strip()
    return result if result else None


def parse_m3u8_attributes(line: str) -> dict[str, str]:
    """Parse M3U8 attribute list (key=value pairs)."""
    attrs = {}
    # Match KEY=VALUE or KEY="VALUE"
    for match in re.finditer(r'(?:^|,)([A-Z0-9-]+)=(?:"([^"]*?)"|([^,]*))', line):
        key = match.group(1)
        value = match.group(2) if match.group(2) is not None else match.group(3)
        attrs[key] = value
    return attrs
