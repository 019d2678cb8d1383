"""One-shot deprecation notices."""

from __future__ import annotations

import logging

LEGACY_SHOW_ROOTS = "legacy-show-roots"
LEGACY_HIERARCHY_SEPARATOR = "legacy-hierarchy-separator"

MESSAGES = {
    LEGACY_SHOW_ROOTS: (
        "The 'show_roots' config option is deprecated. "
        "Use 'sidebar.show_roots' instead."
    ),
    LEGACY_HIERARCHY_SEPARATOR: (
        "The default hierarchy separators changed: '|' and '.' no longer "
        "create a hierarchy, only '/' does."
    ),
}


class DeprecationNotifier:
    """Logs each notice key at most once."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._notified: set[str] = set()

    def notify(self, key: str, message: str | None = None) -> bool:
        """Emit the notice for *key* unless it already fired. Returns True if emitted."""
        if key in self._notified:
            return False
        self._notified.add(key)
        self._logger.warning(message or MESSAGES.get(key, key))
        return True

    def already_notified(self, key: str) -> bool:
        return key in self._notified

    def reset(self) -> None:
        self._notified.clear()


# Process-wide notifier used when callers don't inject their own.
default_notifier = DeprecationNotifier()
