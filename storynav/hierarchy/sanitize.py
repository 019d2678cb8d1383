"""Slug helpers for deriving sidebar ids."""

from __future__ import annotations

import re

_SEPARATOR_CHARS_RE = re.compile(
    r"[\s’–—―′¿'`~!@#$%^&*()_|+\-=?;:\",.<>{}\[\]\\/]", re.IGNORECASE
)
_DASH_RUN_RE = re.compile(r"-+")


def sanitize(value: str) -> str:
    """Convert arbitrary text into an id fragment (lowercase, dash-separated)."""
    slug = _SEPARATOR_CHARS_RE.sub("-", value.lower())
    return _DASH_RUN_RE.sub("-", slug).strip("-")


def _sanitize_safe(value: str, part: str) -> str:
    sanitized = sanitize(value)
    if not sanitized:
        raise ValueError(
            f"Invalid {part} '{value}', must include alphanumeric characters"
        )
    return sanitized


def to_id(kind: str, name: str) -> str:
    """Build a story id such as ``ui-button--basic`` from its kind and name."""
    return f"{_sanitize_safe(kind, 'kind')}--{_sanitize_safe(name, 'name')}"
