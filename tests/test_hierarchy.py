"""End-to-end tests for the storynav.hierarchy pipeline entry points."""

from __future__ import annotations

import pytest

from storynav.hierarchy import (
    PathCollisionError,
    SetStoriesPayload,
    StoryIndex,
    transform_set_stories_payload,
    transform_stories_raw_to_stories_hash,
    transform_story_index_to_stories_hash,
)


SINGLE_STORY_INDEX = {
    "v": 3,
    "stories": {
        "ui-button--basic": {
            "id": "ui-button--basic",
            "name": "Basic",
            "title": "UI/Button",
            "importPath": "./Button.stories.tsx",
        }
    },
}


class TestStoryIndexPipeline:
    def test_single_story_scenario(self, default_provider):
        stories_hash = transform_story_index_to_stories_hash(SINGLE_STORY_INDEX, default_provider)

        assert list(stories_hash) == ["ui", "ui-button", "ui-button--basic"]
        assert stories_hash["ui"].is_root is True
        assert stories_hash["ui"].children == ("ui-button",)
        assert stories_hash["ui-button"].children == ("ui-button--basic",)
        assert stories_hash["ui-button"].is_component is True
        story = stories_hash["ui-button--basic"]
        assert story.depth == 2
        assert story.parent == "ui-button"
        assert story.parameters.file_name == "./Button.stories.tsx"

    def test_index_stories_are_unprepared(self, default_provider):
        stories_hash = transform_story_index_to_stories_hash(SINGLE_STORY_INDEX, default_provider)
        assert stories_hash["ui-button--basic"].prepared is False

    def test_accepts_model_input(self, default_provider):
        index = StoryIndex.model_validate(SINGLE_STORY_INDEX)
        stories_hash = transform_story_index_to_stories_hash(index, default_provider)
        assert "ui-button" in stories_hash

    def test_show_roots_false(self, no_roots_provider):
        stories_hash = transform_story_index_to_stories_hash(SINGLE_STORY_INDEX, no_roots_provider)
        assert stories_hash["ui"].is_root is False
        assert stories_hash["ui"].type == "group"
        assert stories_hash["ui"].depth == 0

    def test_ids_stable_across_builds(self, sample_index, default_provider):
        first = transform_story_index_to_stories_hash(sample_index, default_provider)
        second = transform_story_index_to_stories_hash(sample_index, default_provider)
        assert list(first) == list(second)
        assert first == second

    def test_docs_only_page_flagged(self, sample_index, default_provider):
        stories_hash = transform_story_index_to_stories_hash(sample_index, default_provider)
        assert stories_hash["intro--page"].parameters.docs_only is True
        assert stories_hash["ui-button--basic"].parameters.docs_only is False

    def test_collision_returns_no_hash(self, default_provider):
        index = {
            "stories": {
                "bad--a": {"id": "bad--a", "name": "A", "title": "Bad/-", "importPath": "./x"},
            }
        }
        with pytest.raises(PathCollisionError):
            transform_story_index_to_stories_hash(index, default_provider)


class TestRawPipeline:
    def test_raw_dicts_prepared_by_default(self, default_provider):
        stories_hash = transform_stories_raw_to_stories_hash(
            {
                "ui-button--basic": {
                    "id": "ui-button--basic",
                    "name": "Basic",
                    "kind": "UI/Button",
                    "parameters": {"fileName": "./Button.stories.tsx", "options": {}},
                    "args": {"label": "Click"},
                }
            },
            default_provider,
        )
        story = stories_hash["ui-button--basic"]
        assert story.prepared is True
        assert story.args == {"label": "Click"}

    def test_set_stories_payload(self, default_provider):
        payload = {
            "v": 2,
            "globalParameters": {"layout": "centered", "options": {"a": 1}},
            "kindParameters": {"UI/Button": {"options": {"b": 2}}},
            "stories": {
                "ui-button--basic": {
                    "id": "ui-button--basic",
                    "name": "Basic",
                    "kind": "UI/Button",
                    "parameters": {"fileName": "./Button.stories.tsx", "options": {}},
                }
            },
        }
        stories_hash = transform_set_stories_payload(payload, default_provider)
        params = stories_hash["ui-button--basic"].parameters
        assert params.options == {"a": 1, "b": 2}
        assert params.model_extra["layout"] == "centered"
        assert stories_hash["ui-button--basic"].prepared is True

    def test_set_stories_payload_model(self, default_provider):
        payload = SetStoriesPayload(stories={"a--b": {"id": "a--b", "name": "B", "kind": "A"}})
        stories_hash = transform_set_stories_payload(payload, default_provider)
        assert list(stories_hash) == ["a", "a--b"]
