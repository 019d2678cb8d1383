"""Merge-on-insert for staged hierarchy nodes."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def merge_node(existing: dict[str, Any], incoming: dict[str, Any]) -> dict[str, Any]:
    """Return a new staged node combining *existing* with *incoming*.

    Lists are unioned in first-seen order, nested dicts merge key by key,
    and any other field takes the incoming value unless that value is None.
    """
    merged = dict(existing)
    for key, value in incoming.items():
        current = merged.get(key)
        if isinstance(value, list) and isinstance(current, list):
            merged[key] = list(dict.fromkeys(current + value))
        elif isinstance(current, list):
            logger.debug("type mismatch for %r, keeping %r", key, current)
        elif isinstance(value, dict) and isinstance(current, dict):
            merged[key] = merge_node(current, value)
        elif value is not None:
            merged[key] = value
        elif key not in merged:
            merged[key] = None
    return merged
