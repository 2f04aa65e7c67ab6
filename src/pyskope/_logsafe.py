"""Helpers for compact debug logging.

Study-area geometries can carry thousands of coordinate pairs.  This
module shortens them (and long strings) before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

_COORDINATE_KEYS: frozenset[str] = frozenset({"coordinates", "x", "y"})


def summarize_for_log(value: Any, *, max_items: int = 8, max_string: int = 256, _depth: int = 0) -> Any:
    """Return a shortened copy of *value* suitable for debug logs."""
    if _depth > 20:
        return "<max-depth>"

    if value is None:
        return None

    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value

    if isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, Mapping):
        summary: dict[str, Any] = {}
        for k, v in value.items():
            key = str(k)
            if key in _COORDINATE_KEYS and isinstance(v, Sequence) and not isinstance(v, str):
                summary[key] = f"<{_count_leaves(v)} values>"
            else:
                summary[key] = summarize_for_log(v, max_items=max_items, max_string=max_string, _depth=_depth + 1)
        return summary

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        items = [
            summarize_for_log(v, max_items=max_items, max_string=max_string, _depth=_depth + 1)
            for v in list(value)[:max_items]
        ]
        if len(value) > max_items:
            items.append(f"…<{len(value) - max_items} more>")
        return items

    geo_interface = getattr(value, "__geo_interface__", None)
    if isinstance(geo_interface, Mapping):
        return summarize_for_log(geo_interface, max_items=max_items, max_string=max_string, _depth=_depth + 1)

    return repr(value)


def _count_leaves(value: Any) -> int:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return sum(_count_leaves(item) for item in value)
    return 1
