"""Turn story indexes and raw payloads into leaf records."""

from __future__ import annotations

from collections import Counter
from typing import Any

from storynav.hierarchy.models import SetStoriesPayload, StoryIndex, StoryInput

# Display name that marks a docs-only page when its title has no other entries.
DOCS_PAGE_NAME = "Page"

_MISSING = object()


def normalize_story_index(index: StoryIndex) -> dict[str, StoryInput]:
    """Build one StoryInput per index entry, keyed by story id."""
    count_by_title = Counter(entry.title for entry in index.stories.values())

    stories: dict[str, StoryInput] = {}
    for story_id, entry in index.stories.items():
        docs_only = entry.name == DOCS_PAGE_NAME and count_by_title[entry.title] == 1
        stories[story_id] = StoryInput(
            id=story_id,
            kind=entry.title,
            name=entry.name,
            parameters={
                "file_name": entry.import_path,
                "options": {},
                "docs_only": docs_only,
            },
        )
    return stories


def combine_parameters(*parameter_sets: dict[str, Any] | None) -> dict[str, Any]:
    """Deep-combine parameter dicts, later sets taking precedence.

    Lists replace earlier values instead of merging. Keys holding dicts in
    every set that defines them are combined recursively.
    """
    sets = [p for p in parameter_sets if p]
    combined: dict[str, Any] = {}
    merge_keys: set[str] = set()

    for params in sets:
        for key, value in params.items():
            existing = combined.get(key, _MISSING)
            if isinstance(value, list) or existing is _MISSING:
                combined[key] = value
            elif isinstance(value, dict) and isinstance(existing, dict):
                merge_keys.add(key)
            elif value is not None:
                combined[key] = value

    for key in merge_keys:
        values = [p[key] for p in sets if p.get(key) is not None]
        if all(isinstance(v, dict) for v in values):
            combined[key] = combine_parameters(*values)
        else:
            combined[key] = values[-1]

    return combined


def denormalize_story_parameters(payload: SetStoriesPayload) -> dict[str, StoryInput]:
    """Fold global and per-kind parameters into each raw story."""
    stories: dict[str, StoryInput] = {}
    for story_id, raw in payload.stories.items():
        kind = raw.get("kind", "")
        parameters = combine_parameters(
            payload.global_parameters,
            payload.kind_parameters.get(kind),
            raw.get("parameters"),
        )
        stories[story_id] = StoryInput.model_validate(
            {"id": story_id, **raw, "parameters": parameters}
        )
    return stories
