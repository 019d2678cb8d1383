from typing import Any, Callable, Literal

from pydantic import BaseModel, Field


class SidebarConfig(BaseModel):
    show_roots: bool | None = None
    collapsed_roots: list[str] = Field(default_factory=list)
    render_label: Callable[[Any], Any] | None = Field(default=None, exclude=True)


class UIConfig(BaseModel):
    sidebar: SidebarConfig = Field(default_factory=SidebarConfig)
    # Legacy top-level alias for sidebar.show_roots
    show_roots: bool | None = None


class FeaturesConfig(BaseModel):
    warn_on_legacy_hierarchy_separator: bool = False


class StorynavConfig(BaseModel):
    ui: UIConfig = Field(default_factory=UIConfig)
    features: FeaturesConfig = Field(default_factory=FeaturesConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
