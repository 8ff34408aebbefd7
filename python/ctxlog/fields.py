# Structured key/value fields attached to log records and contexts.

from __future__ import annotations
from typing import Any, Mapping, Optional

Fields = Mapping[str, Any]

def merge_fields(base: Optional[Fields], overlay: Optional[Fields]) -> Optional[dict[str, Any]]:
    """Return a new mapping with ``overlay`` laid over ``base``.

    Neither argument is touched; the result never aliases either of them.
    An empty result comes back as ``None`` so that "no fields" stays
    distinguishable from "zero fields" for adapters that skip formatting.
    """
    merged: dict[str, Any] = {}
    if base:
        merged.update(base)
    if overlay:
        merged.update(overlay)
    if not merged:
        return None
    return merged
