"""Shared test fixtures for storynav."""

import logging

import pytest

from storynav.config.models import SidebarConfig, StorynavConfig, UIConfig
from storynav.hierarchy.lookup import component_lookup_cache, stories_lookup_cache
from storynav.hierarchy.models import StoryInput
from storynav.notices import DeprecationNotifier
from storynav.provider import StaticProvider


@pytest.fixture(autouse=True)
def _clear_lookup_caches():
    component_lookup_cache.clear()
    stories_lookup_cache.clear()
    yield
    component_lookup_cache.clear()
    stories_lookup_cache.clear()


@pytest.fixture
def sample_index():
    """A stories.json index with two components under a shared root."""
    return {
        "v": 3,
        "stories": {
            "ui-button--basic": {
                "id": "ui-button--basic",
                "name": "Basic",
                "title": "UI/Button",
                "importPath": "./Button.stories.tsx",
            },
            "ui-button--primary": {
                "id": "ui-button--primary",
                "name": "Primary",
                "title": "UI/Button",
                "importPath": "./Button.stories.tsx",
            },
            "ui-card--default": {
                "id": "ui-card--default",
                "name": "Default",
                "title": "UI/Card",
                "importPath": "./Card.stories.tsx",
            },
            "intro--page": {
                "id": "intro--page",
                "name": "Page",
                "title": "Intro",
                "importPath": "./Intro.mdx",
            },
        },
    }


@pytest.fixture
def make_story():
    def _make(story_id: str, kind: str, name: str = "Story", **parameters) -> StoryInput:
        return StoryInput(
            id=story_id,
            kind=kind,
            name=name,
            parameters={"file_name": f"./{story_id}.stories.tsx", **parameters},
        )

    return _make


@pytest.fixture
def default_provider():
    return StaticProvider()


@pytest.fixture
def no_roots_provider():
    return StaticProvider(UIConfig(sidebar=SidebarConfig(show_roots=False)))


@pytest.fixture
def notifier():
    return DeprecationNotifier(logging.getLogger("storynav.tests.notices"))


@pytest.fixture
def sample_config():
    return StorynavConfig()
