"""Pydantic models for story indexes and the sidebar hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PathCollisionError(ValueError):
    """Raised when a path segment resolves to the same id as its parent,
    or when a story id is already taken by a root or group node.
    """

    def __init__(
        self, kind: str, part: str, node_id: str, message: str | None = None
    ) -> None:
        self.kind = kind
        self.part = part
        self.node_id = node_id
        super().__init__(
            message
            or f"Invalid part '{part}', leading to id === parentId ('{node_id}'), "
            f"inside kind '{kind}'. Did you create a path that uses the separator "
            f"char accidentally, such as 'Vue <docs/>' where '/' is a separator char?"
        )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Inputs ─────────────────────────────────────────────────────────


class StoryIndexEntry(_CamelModel):
    """One entry of a ``stories.json`` index."""

    id: str
    name: str
    title: str
    import_path: str


class StoryIndex(_CamelModel):
    v: int = 3
    stories: dict[str, StoryIndexEntry] = Field(default_factory=dict)


class StoryParameters(_CamelModel):
    """Story parameters. Unknown keys are kept as extras."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    file_name: str = ""
    options: dict[str, Any] = Field(default_factory=dict)
    docs_only: bool | None = None
    view_mode: str | None = None


class StoryInput(_CamelModel):
    """A leaf record: one story before it is placed in the hierarchy."""

    id: str
    name: str
    kind: str
    ref_id: str | None = None
    parameters: StoryParameters = Field(default_factory=StoryParameters)
    args: dict[str, Any] | None = None
    arg_types: dict[str, Any] | None = None
    initial_args: dict[str, Any] | None = None


class SetStoriesPayload(_CamelModel):
    """Raw stories plus the global and per-kind parameters they inherit."""

    v: int | None = None
    globals: dict[str, Any] = Field(default_factory=dict)
    global_parameters: dict[str, Any] = Field(default_factory=dict)
    kind_parameters: dict[str, dict[str, Any]] = Field(default_factory=dict)
    stories: dict[str, dict[str, Any]] = Field(default_factory=dict)


# ── Nodes ──────────────────────────────────────────────────────────


LabelRenderer = Callable[[Any], Any]


class _Node(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str
    name: str
    depth: int = Field(ge=0)
    ref_id: str | None = None
    render_label: LabelRenderer | None = Field(default=None, exclude=True)


class RootNode(_Node):
    """A top-level category of the sidebar."""

    type: Literal["root"] = "root"
    depth: Literal[0] = 0
    children: tuple[str, ...] = ()
    start_collapsed: bool = False
    is_root: Literal[True] = True
    is_leaf: Literal[False] = False
    is_component: Literal[False] = False


class GroupParameters(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    docs_only: bool | None = None
    view_mode: str | None = None


class GroupNode(_Node):
    """An intermediate node; a component when all of its children are stories."""

    type: Literal["group"] = "group"
    parent: str | None = None
    children: tuple[str, ...] = ()
    parameters: GroupParameters = Field(default_factory=GroupParameters)
    is_root: Literal[False] = False
    is_leaf: Literal[False] = False
    is_component: bool = False


class StoryNode(_Node):
    """A renderable leaf. Stories carry no children collection."""

    type: Literal["story"] = "story"
    kind: str
    parent: str | None = None
    prepared: bool = True
    parameters: StoryParameters = Field(default_factory=StoryParameters)
    args: dict[str, Any] | None = None
    arg_types: dict[str, Any] | None = None
    initial_args: dict[str, Any] | None = None
    is_root: Literal[False] = False
    is_leaf: Literal[True] = True
    is_component: Literal[False] = False


Node = Annotated[Union[RootNode, GroupNode, StoryNode], Field(discriminator="type")]

# Finalized hashes are read-only views over an insertion-ordered dict.
StoriesHash = Mapping[str, Union[RootNode, GroupNode, StoryNode]]
