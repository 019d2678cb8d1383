"""Hierarchy builder: places leaf records under root and group nodes derived from their kind paths."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from storynav.config import FeaturesConfig
from storynav.hierarchy.merge import merge_node
from storynav.hierarchy.models import PathCollisionError, StoryInput
from storynav.hierarchy.sanitize import sanitize
from storynav.notices import (
    LEGACY_HIERARCHY_SEPARATOR,
    LEGACY_SHOW_ROOTS,
    DeprecationNotifier,
    default_notifier,
)
from storynav.provider import Provider

logger = logging.getLogger(__name__)

KIND_PATH_SEPARATOR = re.compile(r"\s*/\s*")
_LEGACY_SEPARATOR_RE = re.compile(r"[.|]")

StagedHash = dict[str, dict[str, Any]]


def split_kind(kind: str) -> list[str]:
    """Split a kind path into its segments. A blank kind has none."""
    kind = kind.strip()
    if not kind:
        return []
    return KIND_PATH_SEPARATOR.split(kind)


def segment_ids(kind: str, segments: list[str]) -> list[str]:
    """Chain segment ids, each derived from its parent's id.

    Raises PathCollisionError when a segment sanitizes to its parent's id.
    """
    ids: list[str] = []
    for part in segments:
        parent = ids[-1] if ids else None
        node_id = sanitize(f"{parent}-{part}" if parent else part)
        if parent == node_id:
            raise PathCollisionError(kind, part, node_id)
        ids.append(node_id)
    return ids


class HierarchyBuilder:
    """Stages root, group and story nodes for a collection of stories.

    Output is a mutable staging hash in story insertion order; pass it to
    ``finalize`` for the read-only, tree-ordered StoriesHash.
    """

    def __init__(
        self,
        provider: Provider,
        *,
        prepared: bool = True,
        features: FeaturesConfig | None = None,
        notifier: DeprecationNotifier | None = None,
    ) -> None:
        self._provider = provider
        self._prepared = prepared
        self._features = features or FeaturesConfig()
        self._notifier = notifier or default_notifier

    def build(self, stories: Mapping[str, StoryInput]) -> StagedHash:
        values = [story for story in stories.values() if story]
        uses_legacy_separator = any(
            _LEGACY_SEPARATOR_RE.search(story.kind) for story in values
        )

        staged: StagedHash = {}
        for story in values:
            self._add_story(staged, story, uses_legacy_separator)

        logger.debug("Staged %d nodes from %d stories", len(staged), len(values))
        return staged

    def _add_story(
        self, staged: StagedHash, story: StoryInput, uses_legacy_separator: bool
    ) -> None:
        ui = self._provider.get_config()
        sidebar = ui.sidebar
        show_roots = sidebar.show_roots if sidebar.show_roots is not None else ui.show_roots

        if ui.show_roots is not None:
            self._notifier.notify(LEGACY_SHOW_ROOTS)

        show_roots_set = show_roots is not None
        if (
            uses_legacy_separator
            and not show_roots_set
            and self._features.warn_on_legacy_hierarchy_separator
        ):
            self._notifier.notify(LEGACY_HIERARCHY_SEPARATOR)

        segments = split_kind(story.kind)
        has_root = (not show_roots_set or show_roots) and len(segments) > 1
        ids = segment_ids(story.kind, segments)
        if story.id in ids:
            raise PathCollisionError(
                story.kind,
                story.name,
                story.id,
                f"Story '{story.name}' has id '{story.id}', which is also the id of "
                f"one of its own groups inside kind '{story.kind}'.",
            )
        paths = [*ids, story.id]

        for index, (node_id, name) in enumerate(zip(ids, segments)):
            if has_root and index == 0:
                node: dict[str, Any] = {
                    "type": "root",
                    "id": node_id,
                    "name": name,
                    "depth": 0,
                    "start_collapsed": node_id in sidebar.collapsed_roots,
                }
            else:
                node = {
                    "type": "group",
                    "id": node_id,
                    "name": name,
                    "parent": ids[index - 1] if index > 0 else None,
                    "depth": index,
                    "parameters": {
                        "docs_only": story.parameters.docs_only,
                        "view_mode": story.parameters.view_mode,
                    },
                }
            node["ref_id"] = story.ref_id
            node["render_label"] = sidebar.render_label
            node["children"] = [paths[index + 1]]

            existing = staged.get(node_id)
            if existing is not None and existing["type"] == "story":
                raise _story_clash(story, node_id, node["type"])
            if existing is not None:
                staged[node_id] = merge_node(staged[node_id], node)
            else:
                staged[node_id] = node

        existing = staged.get(story.id)
        if existing is not None and existing["type"] != "story":
            raise _story_clash(story, story.id, existing["type"])

        staged[story.id] = {
            **story.model_dump(exclude_none=True),
            "parameters": story.parameters,
            "type": "story",
            "depth": len(ids),
            "parent": ids[-1] if ids else None,
            "render_label": sidebar.render_label,
            "prepared": self._prepared,
        }


def _story_clash(story: StoryInput, node_id: str, node_type: str) -> PathCollisionError:
    # Root and group entries may replace each other; a story never shares an id.
    return PathCollisionError(
        story.kind,
        story.name,
        node_id,
        f"Id '{node_id}' is used by both a story and a {node_type} node "
        f"(while adding story '{story.id}' of kind '{story.kind}').",
    )
