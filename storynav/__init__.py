"""storynav - sidebar navigation trees from flat story indexes."""

from storynav.config import StorynavConfig, load_config
from storynav.hierarchy import (
    PathCollisionError,
    StoriesHash,
    get_component_lookup_list,
    get_stories_lookup_list,
    is_group,
    is_root,
    is_story,
    transform_set_stories_payload,
    transform_stories_raw_to_stories_hash,
    transform_story_index_to_stories_hash,
)
from storynav.notices import DeprecationNotifier
from storynav.provider import ConfigFileProvider, Provider, StaticProvider

__version__ = "0.1.0"

__all__ = [
    "ConfigFileProvider",
    "DeprecationNotifier",
    "PathCollisionError",
    "Provider",
    "StaticProvider",
    "StoriesHash",
    "StorynavConfig",
    "get_component_lookup_list",
    "get_stories_lookup_list",
    "is_group",
    "is_root",
    "is_story",
    "load_config",
    "transform_set_stories_payload",
    "transform_stories_raw_to_stories_hash",
    "transform_story_index_to_stories_hash",
]
