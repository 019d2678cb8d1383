"""Providers serving sidebar settings to the hierarchy builder."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from storynav.config import UIConfig, load_config


@runtime_checkable
class Provider(Protocol):
    """Source of UI settings. Called once per story, so it must be cheap."""

    def get_config(self) -> UIConfig: ...


class StaticProvider:
    """Serves a fixed UIConfig."""

    def __init__(self, config: UIConfig | None = None) -> None:
        self._config = config or UIConfig()

    def get_config(self) -> UIConfig:
        return self._config


class ConfigFileProvider:
    """Serves the ``ui`` section of a storynav.yaml, loaded once."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._config = load_config(str(path) if path else None).ui

    def get_config(self) -> UIConfig:
        return self._config
