"""CLI entry point for storynav."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.tree import Tree

from storynav.config import StorynavConfig, UIConfig, load_config
from storynav.config.loader import DEFAULT_CONFIG_TEMPLATE
from storynav.hierarchy import (
    PathCollisionError,
    StoriesHash,
    get_component_lookup_list,
    get_stories_lookup_list,
    is_root,
    is_story,
    transform_set_stories_payload,
    transform_story_index_to_stories_hash,
)
from storynav.log import configure_logging
from storynav.provider import StaticProvider

app = typer.Typer(
    name="storynav",
    help="Build sidebar navigation trees from story indexes.",
)

config_app = typer.Typer(help="Manage storynav configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: StorynavConfig | None = None


def _get_config() -> StorynavConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to storynav.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)


def _ui_config(cfg: StorynavConfig, show_roots: bool | None) -> UIConfig:
    if show_roots is None:
        return cfg.ui
    sidebar = cfg.ui.sidebar.model_copy(update={"show_roots": show_roots})
    return cfg.ui.model_copy(update={"sidebar": sidebar})


def _load_hash(path: Path, raw: bool, show_roots: bool | None) -> StoriesHash:
    """Read an index (or raw payload) file and build its StoriesHash.

    Raises typer.Exit(1) after printing the error.
    """
    cfg = _get_config()
    provider = StaticProvider(_ui_config(cfg, show_roots))
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if raw:
            return transform_set_stories_payload(data, provider, features=cfg.features)
        return transform_story_index_to_stories_hash(data, provider, features=cfg.features)
    except FileNotFoundError:
        rprint(f"[red]Error:[/red] File not found: {path}")
    except json.JSONDecodeError as e:
        rprint(f"[red]Error:[/red] Invalid JSON in {path}: {e}")
    except ValidationError as e:
        rprint(f"[red]Error:[/red] Invalid index in {path}: {escape(str(e))}")
    except PathCollisionError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
    raise typer.Exit(1)


def _label(node) -> str:
    name = escape(node.name)
    if is_root(node):
        return f"[bold]{name}[/bold]"
    if is_story(node):
        return f"[green]{name}[/green] [dim]({node.id})[/dim]"
    if node.is_component:
        return f"[cyan]{name}[/cyan]"
    return name


def _render_tree(stories: StoriesHash) -> Tree:
    tree = Tree(f"[bold]Sidebar[/bold] ({len(stories)} nodes)")

    def add(branch: Tree, node_id: str) -> None:
        node = stories[node_id]
        child_branch = branch.add(_label(node))
        for child_id in getattr(node, "children", None) or ():
            add(child_branch, child_id)

    for node_id, node in stories.items():
        if is_root(node) or getattr(node, "parent", None) is None:
            add(tree, node_id)
    return tree


@app.command()
def build(
    path: Path = typer.Argument(..., help="stories.json index file"),
    raw: bool = typer.Option(False, "--raw", help="Input is a raw set-stories payload"),
    as_json: bool = typer.Option(False, "--json", help="Output the hash as JSON"),
    show_roots: bool | None = typer.Option(
        None, "--show-roots/--no-show-roots", help="Override sidebar.show_roots"
    ),
) -> None:
    """Build the sidebar hierarchy for a story index."""
    stories = _load_hash(path, raw, show_roots)
    if as_json:
        dumped = {
            node_id: node.model_dump(mode="json", by_alias=True)
            for node_id, node in stories.items()
        }
        typer.echo(json.dumps(dumped, indent=2))
        return
    rprint(_render_tree(stories))


@app.command()
def lookup(
    path: Path = typer.Argument(..., help="stories.json index file"),
    components: bool = typer.Option(
        False, "--components/--stories", help="List component children instead of story ids"
    ),
    raw: bool = typer.Option(False, "--raw", help="Input is a raw set-stories payload"),
) -> None:
    """Print the story id list, or the children of every component."""
    stories = _load_hash(path, raw, None)
    if components:
        for children in get_component_lookup_list(stories):
            typer.echo(" ".join(children))
    else:
        for story_id in get_stories_lookup_list(stories):
            typer.echo(story_id)


@config_app.command("show")
def config_show() -> None:
    """Print the resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create a storynav.yaml in the current directory."""
    target = Path("storynav.yaml")
    if target.exists() and not force:
        rprint("[yellow]storynav.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
