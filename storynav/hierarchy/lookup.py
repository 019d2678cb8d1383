"""Node predicates and cached lookup lists over a finalized StoriesHash."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from storynav.hierarchy.models import GroupNode, RootNode, StoriesHash, StoryNode

T = TypeVar("T")

_EMPTY = object()


def is_root(item: RootNode | GroupNode | StoryNode | None) -> bool:
    return isinstance(item, RootNode)


def is_group(item: RootNode | GroupNode | StoryNode | None) -> bool:
    return isinstance(item, GroupNode)


def is_story(item: RootNode | GroupNode | StoryNode | None) -> bool:
    return isinstance(item, StoryNode)


class SingleSlotCache(Generic[T]):
    """Remembers the result for the last key only, compared by identity.

    The cache holds a reference to its key, so an id cannot be recycled
    while the entry is alive. Calling with a different key evicts it.
    """

    def __init__(self, compute: Callable[[Any], T]) -> None:
        self._compute = compute
        self._key: Any = _EMPTY
        self._value: T | None = None
        self.hits = 0
        self.misses = 0

    def __call__(self, key: Any) -> T:
        if key is self._key:
            self.hits += 1
            return self._value  # type: ignore[return-value]
        self.misses += 1
        value = self._compute(key)
        self._key = key
        self._value = value
        return value

    def clear(self) -> None:
        self._key = _EMPTY
        self._value = None


def _component_lookup_list(stories_hash: StoriesHash) -> tuple[tuple[str, ...], ...]:
    return tuple(tuple(node.children) for node in stories_hash.values() if node.is_component)


def _stories_lookup_list(stories_hash: StoriesHash) -> tuple[str, ...]:
    return tuple(
        node_id
        for node_id, node in stories_hash.items()
        if getattr(node, "children", None) is None
    )


component_lookup_cache: SingleSlotCache[tuple[tuple[str, ...], ...]] = SingleSlotCache(
    _component_lookup_list
)
stories_lookup_cache: SingleSlotCache[tuple[str, ...]] = SingleSlotCache(_stories_lookup_list)


def get_component_lookup_list(stories_hash: StoriesHash) -> tuple[tuple[str, ...], ...]:
    """Children ids of every component, one tuple per component."""
    return component_lookup_cache(stories_hash)


def get_stories_lookup_list(stories_hash: StoriesHash) -> tuple[str, ...]:
    """Ids of every node without a children collection, i.e. every story."""
    return stories_lookup_cache(stories_hash)
