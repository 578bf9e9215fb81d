from __future__ import annotations

"""Arborette Command Line Interface."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from jsonschema import ValidationError
from rich.console import Console
from rich.markup import escape

from arborette.config import RunConfig, apply_overrides, load_config
from arborette.core.component import Component
from arborette.driver import run_demo
from arborette.errors import ArboretteError
from arborette.io.sink import OutputSink, make_sink
from arborette.utils import logging as alog
from arborette.yaml_loader import load_tree

app = typer.Typer(
    name="arborette",
    help="CLI for arborette: build component trees and act on them.",
    add_completion=False,
)

console = Console(stderr=True)


def _fail(msg: str) -> None:
    console.print(f"[bold red]Error: {escape(msg)}[/]", markup=True, highlight=False)
    raise typer.Exit(code=1)


def _resolve_config(ctx: typer.Context, config_file: Optional[Path], **overrides) -> RunConfig:
    """Load *config_file*, apply the CLI flags that were given, set the log level."""
    overrides["log_level"] = (ctx.obj or {}).get("log_level")
    try:
        cfg = apply_overrides(load_config(config_file), **overrides)
    except ArboretteError as e:
        _fail(str(e))
    alog.get(cfg.log_level)
    return cfg


def _sink_for(cfg: RunConfig) -> OutputSink:
    try:
        return make_sink(cfg.sink)
    except ArboretteError as e:
        _fail(str(e))


def _load(tree_file: Path, sink: OutputSink | None = None) -> Component:
    try:
        return load_tree(tree_file, sink=sink)
    except ValidationError as e:
        _fail(f"Invalid tree file {tree_file}: {e.message}")
    except yaml.YAMLError as e:
        _fail(f"Cannot parse {tree_file}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {tree_file}: {e}")
    except ArboretteError as e:
        _fail(str(e))


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="debug, info, warning or error (overrides the config file)."
    ),
):
    """Composite trees where leaves emit and branches delegate."""
    ctx.obj = {"log_level": log_level}


@app.command()
def demo(
    ctx: typer.Context,
    pause: Optional[bool] = typer.Option(None, "--pause/--no-pause", help="Wait for a key before exiting."),
    sink: Optional[str] = typer.Option(None, "--sink", help="Where labels go: console or log."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML run configuration."),
):
    """Act once on a root composite holding leaves L1, L2 and L3."""
    cfg = _resolve_config(ctx, config_file, pause=pause, sink=sink)
    out = _sink_for(cfg)
    alog.log.info("demo run (sink=%s)", cfg.sink)
    run_demo(out, pause=cfg.pause)


@app.command()
def run(
    ctx: typer.Context,
    tree_file: Path = typer.Argument(..., help="YAML tree file.", exists=True, file_okay=True, dir_okay=False, readable=True),
    sink: Optional[str] = typer.Option(None, "--sink", help="Where labels go: console or log."),
    config_file: Optional[Path] = typer.Option(None, "--config", help="YAML run configuration."),
):
    """Load a tree from YAML and act once on its root."""
    cfg = _resolve_config(ctx, config_file, sink=sink)
    root = _load(tree_file, _sink_for(cfg))
    alog.log.info("loaded tree from %s", tree_file)
    root.perform_action()


@app.command()
def inspect(
    tree_file: Path = typer.Argument(..., help="YAML tree file.", exists=True, file_okay=True, dir_okay=False, readable=True),
    icons: bool = typer.Option(True, "--icons/--no-icons", help="Prefix nodes with icons."),
    max_children: Optional[int] = typer.Option(None, "--max-children", min=1, help="Collapse wide composites."),
):
    """Print the tree without acting on it."""
    from arborette.utils.tree import RenderOptions

    root = _load(tree_file)
    alog.show_tree(root, opts=RenderOptions(icons_on=icons, max_children=max_children), title=tree_file.name)


if __name__ == "__main__":
    app()
