"""Story hierarchy: from flat story records to a sidebar-ready StoriesHash."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from storynav.config import FeaturesConfig
from storynav.hierarchy.builder import HierarchyBuilder
from storynav.hierarchy.finalizer import finalize
from storynav.hierarchy.lookup import (
    SingleSlotCache,
    get_component_lookup_list,
    get_stories_lookup_list,
    is_group,
    is_root,
    is_story,
)
from storynav.hierarchy.models import (
    GroupNode,
    PathCollisionError,
    RootNode,
    SetStoriesPayload,
    StoriesHash,
    StoryIndex,
    StoryIndexEntry,
    StoryInput,
    StoryNode,
    StoryParameters,
)
from storynav.hierarchy.normalizer import (
    combine_parameters,
    denormalize_story_parameters,
    normalize_story_index,
)
from storynav.hierarchy.sanitize import sanitize, to_id
from storynav.notices import DeprecationNotifier
from storynav.provider import Provider


def transform_stories_raw_to_stories_hash(
    stories: Mapping[str, StoryInput | dict[str, Any]],
    provider: Provider,
    *,
    prepared: bool = True,
    features: FeaturesConfig | None = None,
    notifier: DeprecationNotifier | None = None,
) -> StoriesHash:
    """Build the finalized StoriesHash for a mapping of story id -> story."""
    inputs = {
        story_id: StoryInput.model_validate(story) if isinstance(story, dict) else story
        for story_id, story in stories.items()
    }
    builder = HierarchyBuilder(
        provider, prepared=prepared, features=features, notifier=notifier
    )
    return finalize(builder.build(inputs))


def transform_story_index_to_stories_hash(
    index: StoryIndex | dict[str, Any],
    provider: Provider,
    *,
    features: FeaturesConfig | None = None,
    notifier: DeprecationNotifier | None = None,
) -> StoriesHash:
    """Build placeholder (unprepared) stories from a ``stories.json`` index."""
    if isinstance(index, dict):
        index = StoryIndex.model_validate(index)
    return transform_stories_raw_to_stories_hash(
        normalize_story_index(index),
        provider,
        prepared=False,
        features=features,
        notifier=notifier,
    )


def transform_set_stories_payload(
    payload: SetStoriesPayload | dict[str, Any],
    provider: Provider,
    *,
    features: FeaturesConfig | None = None,
    notifier: DeprecationNotifier | None = None,
) -> StoriesHash:
    """Build prepared stories from a raw payload with inherited parameters."""
    if isinstance(payload, dict):
        payload = SetStoriesPayload.model_validate(payload)
    return transform_stories_raw_to_stories_hash(
        denormalize_story_parameters(payload),
        provider,
        prepared=True,
        features=features,
        notifier=notifier,
    )


__all__ = [
    "GroupNode",
    "HierarchyBuilder",
    "PathCollisionError",
    "RootNode",
    "SetStoriesPayload",
    "SingleSlotCache",
    "StoriesHash",
    "StoryIndex",
    "StoryIndexEntry",
    "StoryInput",
    "StoryNode",
    "StoryParameters",
    "combine_parameters",
    "denormalize_story_parameters",
    "finalize",
    "get_component_lookup_list",
    "get_stories_lookup_list",
    "is_group",
    "is_root",
    "is_story",
    "normalize_story_index",
    "sanitize",
    "to_id",
    "transform_set_stories_payload",
    "transform_stories_raw_to_stories_hash",
    "transform_story_index_to_stories_hash",
]
