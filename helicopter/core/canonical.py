"""
Canonical rendering of opaque payloads.

Actions, events and states are never interpreted by the engine, but they are
written to diagnostic logs. These helpers give them a stable textual form.
"""

import json
import reprlib
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list to canonical form.

    Rules:
    - dict keys sorted (as strings)
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_str(obj: Any) -> str:
    """
    Deterministic JSON string for a payload.

    Values JSON cannot encode natively are rendered with repr().
    """
    canon = canonicalize(obj)
    return json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=repr)


def describe(obj: Any, limit: int = 512) -> str:
    """
    Short canonical rendering for log lines.

    Never raises: cyclic or very deep payloads fall back to a bounded repr.
    """
    try:
        text = canonical_json_str(obj)
    except (RecursionError, ValueError, TypeError):
        text = reprlib.repr(obj)
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class LazyDescription:
    """Defers describe() until a log record is actually formatted."""

    __slots__ = ("obj", "limit")

    def __init__(self, obj: Any, limit: int = 512) -> None:
        self.obj = obj
        self.limit = limit

    def __str__(self) -> str:
        return describe(self.obj, self.limit)


def lazy_describe(obj: Any, limit: int = 512) -> LazyDescription:
    return LazyDescription(obj, limit)
