from .loader import load_config
from .models import (
    FeaturesConfig,
    SidebarConfig,
    StorynavConfig,
    UIConfig,
)

__all__ = [
    "FeaturesConfig",
    "SidebarConfig",
    "StorynavConfig",
    "UIConfig",
    "load_config",
]
