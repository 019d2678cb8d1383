"""YAML config loading for storynav.

Sources are tried in order: an explicit ``--config`` path, ``./storynav.yaml``,
then ``~/.storynav/config.yaml``. The first file with content wins; with none,
defaults apply. ``${VAR}`` and ``${VAR:-fallback}`` references are expanded
before validation.
"""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import StorynavConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "storynav.yaml"

_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def config_sources(cli_path: str | None = None) -> list[tuple[str, Path]]:
    """Candidate config files as ``(source, path)`` pairs, highest priority first."""
    sources = []
    if cli_path:
        sources.append(("cli", Path(cli_path)))
    sources.append(("project", Path(".") / CONFIG_FILENAME))
    sources.append(("user", Path.home() / ".storynav" / "config.yaml"))
    return sources


def load_config(cli_path: str | None = None) -> StorynavConfig:
    """Resolve and validate the storynav config."""
    for source, path in config_sources(cli_path):
        if not path.exists():
            if source == "cli":
                logger.warning("Config file %s not found, falling back", path)
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        try:
            config = StorynavConfig.model_validate(_expand_env_vars(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("Loaded %s config from %s", source, path)
        return config

    logger.debug("No config file found, using defaults")
    return StorynavConfig()


def _read_yaml(path: Path) -> dict | None:
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(
            f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}"
        )
    return raw


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} and ${VAR:-fallback} references in strings."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1)) or m.group(2) or "", obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `storynav config init`
DEFAULT_CONFIG_TEMPLATE = """\
# storynav.yaml

# Sidebar settings, served to the hierarchy builder by the provider
ui:
  sidebar:
    # show_roots: true         # unset: promote the first segment of multi-segment kinds
    collapsed_roots: []        # root ids that start collapsed
  # show_roots: true           # deprecated, use ui.sidebar.show_roots

# Feature flags
features:
  warn_on_legacy_hierarchy_separator: false   # notice when kinds still use '.' or '|'

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
