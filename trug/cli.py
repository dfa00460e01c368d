"""Command-line interface for Trug.

This module defines the CLI commands using Click framework.

Commands:
- new: Scaffold a new Trug project.
- assets: List the stylesheets and scripts found under public/.
- render: Render the project layout.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import click
import yaml
from markupsafe import Markup, escape

from . import __version__

# Files copied into new projects
_SCAFFOLD_DIR = Path(__file__).parent / "scaffold"
# Placeholder title in the bundled static pages
_SCAFFOLD_TITLE = "My Slides"

_root_option = click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (defaults to the current directory)",
)


@click.group()
@click.version_option(version=__version__, prog_name="trug")
def cli():
    """Trug static site scaffold."""


@cli.command()
@click.argument("name")
def new(name: str):
    """Scaffold a new Trug project."""
    target = Path(name).resolve()
    if target.exists() and not target.is_dir():
        raise click.ClickException(f"Refusing to initialize over a file: {target}")
    if target.exists() and any(target.iterdir()):
        raise click.ClickException(
            f"Refusing to initialize into non-empty directory: {target}"
        )
    _scaffold(target)
    click.echo(f"New Trug site created at {target}")


@cli.command()
@_root_option
@click.option("--json", "as_json", is_flag=True, help="Print assets as JSON")
def assets(root: Path | None, as_json: bool):
    """List stylesheets and scripts found under public/."""
    from .assets import AssetLister

    project_root = root or Path.cwd()
    found = AssetLister(project_root).collect()
    if as_json:
        click.echo(json.dumps(found.to_dict(), indent=2))
        return
    click.echo(click.style("Stylesheets:", bold=True))
    for name in found.stylesheets:
        click.echo(f"  {name}")
    click.echo(click.style("Javascripts:", bold=True))
    for name in found.javascripts:
        click.echo(f"  {name}")


@cli.command()
@_root_option
@click.option(
    "--content",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="HTML fragment inserted as page_content",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the rendered layout to this file instead of stdout",
)
def render(root: Path | None, content: Path | None, output: Path | None):
    """Render the project layout."""
    from .config import ConfigError, load_config
    from .page import Page
    from .templates import LayoutRenderer, RenderError

    project_root = root or Path.cwd()
    try:
        config = load_config(project_root)
        page_content = _read_content(content) if content else Markup("")
        html = LayoutRenderer(config).render(Page(config), page_content=page_content)
    except ConfigError as exc:
        click.echo(click.style("Invalid configuration:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  File: {exc.config_path}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    except RenderError as exc:
        click.echo(click.style("Render failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Layout: {exc.layout}", fg="yellow"), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None

    if output is None:
        click.echo(html, nl=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    click.echo(f"Rendered {config.layout} into {output}")


def _read_content(path: Path) -> Markup:
    """Read an HTML fragment to insert as page_content."""
    try:
        return Markup(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Cannot read content file {path}: {exc}") from exc


def main():
    """Entry point for the CLI application."""
    cli()


def _scaffold(root: Path) -> None:
    """Create the directory structure and files for a new Trug project.

    Args:
        root: Root directory for the new project.
    """
    for src_path in _SCAFFOLD_DIR.rglob("*"):
        if src_path.is_dir():
            continue
        rel_path = src_path.relative_to(_SCAFFOLD_DIR)
        dest_path = root / rel_path
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, dest_path)

    title = _titleize(root.name)
    config = {"title": title, "layout": "layout"}
    (root / "trug.yaml").write_text(
        yaml.safe_dump(config, sort_keys=False, allow_unicode=True), encoding="utf-8"
    )

    index_path = root / "public" / "index.html"
    page = index_path.read_text(encoding="utf-8")
    index_path.write_text(
        page.replace(_SCAFFOLD_TITLE, str(escape(title))), encoding="utf-8"
    )


def _titleize(name: str) -> str:
    """Convert a directory name to title case."""
    words = name.replace("-", " ").replace("_", " ").split()
    return " ".join(word.capitalize() for word in words)
