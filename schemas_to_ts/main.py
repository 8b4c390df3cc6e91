"""
schemas-to-ts — CLI entrypoint.

Usage:
    python -m schemas_to_ts.main --help
    python -m schemas_to_ts.main resolve
    python -m schemas_to_ts.main generate artifacts.yml
    python -m schemas_to_ts.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from schemas_to_ts import __version__
from schemas_to_ts.core.errors import SchemasToTsError
from schemas_to_ts.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="schemas-to-ts")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to schemas-to-ts.yml (default: auto-detect).",
)
@click.option(
    "--root",
    "-r",
    "root",
    type=click.Path(exists=False, file_okay=False),
    default=None,
    help="Strapi project root (default: current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    root: str | None,
) -> None:
    """schemas-to-ts — place generated TypeScript interfaces in a Strapi project."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None
    ctx.obj["root"] = Path(root) if root else Path.cwd()

    if debug:
        ctx.obj["level_flag"] = "DEBUG"
    elif verbose:
        ctx.obj["level_flag"] = "INFO"
    elif quiet:
        ctx.obj["level_flag"] = "ERROR"
    else:
        ctx.obj["level_flag"] = None

    _setup_logging(ctx, None)


def _setup_logging(ctx: click.Context, config_level: str | None) -> None:
    setup_logging(
        level=resolve_level(ctx.obj.get("level_flag"), config_level),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


def _load(ctx: click.Context):
    """Load config and layout, then re-apply logging with the config's level."""
    from schemas_to_ts.core.config.loader import find_config_file, load_plugin_config
    from schemas_to_ts.core.models.layout import DirectoryLayout
    from schemas_to_ts.core.models.plugin_config import PluginConfig

    layout = DirectoryLayout.from_root(ctx.obj["root"])
    config_path = ctx.obj.get("config_path") or find_config_file(layout.app.root)
    config = load_plugin_config(config_path) if config_path else PluginConfig()
    _setup_logging(ctx, config.log_level)
    return config, layout


def _fail(error: SchemasToTsError, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({"error": str(error)}, indent=2))
    else:
        click.secho(f"❌ {error}", fg="red")
    sys.exit(1)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, as_json: bool) -> None:
    """Resolve (and create) the destination folders."""
    from schemas_to_ts.core.services.destination_paths import resolve_destination_paths

    try:
        config, layout = _load(ctx)
        tree = resolve_destination_paths(config, layout)
    except SchemasToTsError as e:
        _fail(e, as_json)
        return

    if as_json:
        click.echo(json.dumps(tree.to_dict(), indent=2))
        return

    click.secho("\n📁 Destination folders", fg="cyan", bold=True)
    for name, folder in tree.to_dict().items():
        if name == "use_for_apis_and_components":
            continue
        click.echo(f"   {name:<11} → {folder or '(next to schemas)'}")
    click.echo()


@cli.command()
@click.argument("manifest", type=click.Path(exists=False, dir_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, manifest: str, as_json: bool) -> None:
    """Write the artifacts listed in MANIFEST, clean up and rebuild indexes.

    Examples:

        schemas-to-ts generate artifacts.yml

        schemas-to-ts --root ./cms generate artifacts.json --json
    """
    from schemas_to_ts.core.config.manifest import load_artifact_manifest
    from schemas_to_ts.core.use_cases.generate import run_generation

    try:
        config, layout = _load(ctx)
        artifacts = load_artifact_manifest(Path(manifest), layout.app.root)
        result = run_generation(config, layout, artifacts)
    except SchemasToTsError as e:
        _fail(e, as_json)
        return

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if ctx.obj.get("quiet"):
        return

    click.secho("\n✅ Interfaces generated", fg="green", bold=True)
    click.echo(f"   Written:     {len(result.written)}")
    click.echo(f"   Up to date:  {len(result.unchanged)}")
    click.echo(f"   Deleted:     {len(result.deleted)}")
    click.echo(f"   Index files: {len(result.index_files)}")
    for path in result.deleted:
        click.secho(f"     🗑  {path}", fg="yellow")
    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def clean(ctx: click.Context, as_json: bool) -> None:
    """Delete every generated interface file in the project.

    Only files whose first line is the schemas-to-ts header are removed.
    """
    from schemas_to_ts.core.services.stale_collector import collect_stale_artifacts

    try:
        _config, layout = _load(ctx)
        deleted = collect_stale_artifacts(layout, keep=())
    except SchemasToTsError as e:
        _fail(e, as_json)
        return

    if as_json:
        click.echo(json.dumps({"deleted": [str(p) for p in deleted]}, indent=2))
        return

    click.secho(f"🗑  Deleted {len(deleted)} generated file(s)", fg="cyan")
    for path in deleted:
        click.echo(f"   • {path}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def index(ctx: click.Context, as_json: bool) -> None:
    """Regenerate index.ts barrel files in the destination folders."""
    from schemas_to_ts.core.services.destination_paths import resolve_destination_paths
    from schemas_to_ts.core.services.index_aggregator import generate_index_files

    try:
        config, layout = _load(ctx)
        index_files = generate_index_files(resolve_destination_paths(config, layout))
    except SchemasToTsError as e:
        _fail(e, as_json)
        return

    if as_json:
        click.echo(json.dumps({"index_files": [str(p) for p in index_files]}, indent=2))
        return

    click.secho(f"📇 {len(index_files)} index file(s)", fg="cyan")
    for path in index_files:
        click.echo(f"   • {path}")


@cli.group()
def config() -> None:
    """Plugin configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate schemas-to-ts.yml against the project layout."""
    from schemas_to_ts.core.models.layout import DirectoryLayout
    from schemas_to_ts.core.use_cases.config_check import check_config

    layout = DirectoryLayout.from_root(ctx.obj["root"])
    result = check_config(layout, config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Destination: {result.destination or '(default folders)'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()
