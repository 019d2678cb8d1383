"""Tests for storynav.hierarchy.lookup: predicates and cached lookup lists."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from storynav.hierarchy import transform_story_index_to_stories_hash
from storynav.hierarchy.lookup import (
    SingleSlotCache,
    get_component_lookup_list,
    get_stories_lookup_list,
    is_group,
    is_root,
    is_story,
    stories_lookup_cache,
)
from storynav.hierarchy.models import GroupNode, RootNode, StoryNode


class TestPredicates:
    def test_root(self):
        node = RootNode(id="ui", name="UI")
        assert is_root(node) and not is_group(node) and not is_story(node)

    def test_group(self):
        node = GroupNode(id="ui-button", name="Button", depth=1, parent="ui")
        assert is_group(node) and not is_root(node) and not is_story(node)

    def test_story(self):
        node = StoryNode(id="ui-button--a", name="A", kind="UI/Button", depth=2, parent="ui-button")
        assert is_story(node) and not is_root(node) and not is_group(node)

    def test_missing_item(self):
        assert not is_root(None)
        assert not is_group(None)
        assert not is_story(None)


class TestSingleSlotCache:
    def test_same_key_hits(self):
        calls = []
        cache = SingleSlotCache(lambda key: calls.append(key) or len(calls))
        key = object()
        assert cache(key) == 1
        assert cache(key) == 1
        assert (cache.hits, cache.misses) == (1, 1)

    def test_new_key_evicts(self):
        cache = SingleSlotCache(lambda key: id(key))
        first, second = object(), object()
        cache(first)
        cache(second)
        cache(first)
        assert cache.misses == 3

    def test_equal_but_distinct_keys_miss(self):
        cache = SingleSlotCache(lambda key: dict(key))
        cache({"a": 1})
        cache({"a": 1})
        assert cache.misses == 2

    def test_clear(self):
        cache = SingleSlotCache(lambda key: 1)
        key = object()
        cache(key)
        cache.clear()
        cache(key)
        assert cache.misses == 2


class TestLookupLists:
    def test_component_lookup_list(self, sample_index, default_provider):
        stories_hash = transform_story_index_to_stories_hash(sample_index, default_provider)
        assert get_component_lookup_list(stories_hash) == (
            ("ui-button--basic", "ui-button--primary"),
            ("ui-card--default",),
            ("intro--page",),
        )

    def test_stories_lookup_matches_predicate(self, sample_index, default_provider):
        stories_hash = transform_story_index_to_stories_hash(sample_index, default_provider)
        assert get_stories_lookup_list(stories_hash) == tuple(
            node_id for node_id, node in stories_hash.items() if is_story(node)
        )

    def test_empty_children_is_not_a_story(self):
        stories_hash = MappingProxyType(
            {"empty": GroupNode(id="empty", name="Empty", depth=0, children=())}
        )
        assert get_stories_lookup_list(stories_hash) == ()

    def test_result_cached_per_hash(self, sample_index, default_provider):
        stories_hash = transform_story_index_to_stories_hash(sample_index, default_provider)
        hits_before = stories_lookup_cache.hits
        first = get_stories_lookup_list(stories_hash)
        assert get_stories_lookup_list(stories_hash) is first
        assert stories_lookup_cache.hits == hits_before + 1

    def test_fresh_hash_invalidates(self, sample_index, default_provider):
        first = get_stories_lookup_list(
            transform_story_index_to_stories_hash(sample_index, default_provider)
        )
        second = get_stories_lookup_list(
            transform_story_index_to_stories_hash(sample_index, default_provider)
        )
        assert first == second
        assert first is not second

    def test_cached_views_are_immutable(self, sample_index, default_provider):
        stories_hash = transform_story_index_to_stories_hash(sample_index, default_provider)
        story_ids = get_stories_lookup_list(stories_hash)
        with pytest.raises(AttributeError):
            story_ids.append("bogus")
        assert "bogus" not in get_stories_lookup_list(stories_hash)
        assert isinstance(get_component_lookup_list(stories_hash)[0], tuple)
