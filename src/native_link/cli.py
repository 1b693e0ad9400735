"""Command-line interface for linking native dependencies."""

import asyncio
import dataclasses
import json
import sys
from pathlib import Path

import click

from . import logger
from .config import get_project_config
from .errors import LinkError
from .link import link, pick_platforms
from .models import Context, LinkOptions
from .platforms import get_platforms


def _parse_platforms(ctx, param, value):
    """Split a comma-separated --platforms value into lower-case names."""
    if value is None:
        return None
    return [name.strip() for name in value.lower().split(",") if name.strip()]


def _to_json(value):
    if dataclasses.is_dataclass(value):
        return dataclasses.asdict(value)
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@click.group()
@click.version_option(package_name="native-link")
def main():
    """Link third-party native modules into iOS and Android app projects."""
    pass


@main.command("link")
@click.argument("package_name", required=False, default=None)
@click.option("--platforms", callback=_parse_platforms, default=None,
              help="Scope linking to certain platforms (comma-separated), e.g. ios,android")
@click.option("--root", type=click.Path(file_okay=False), default=".", help="App root directory")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def link_command(package_name, platforms, root, verbose):
    """Link native dependencies into the app.

    With PACKAGE_NAME only that package is processed; a trailing @version
    is ignored. Without it every dependency in package.json is linked.

    Example:
        native-link link react-native-vector-icons --platforms ios
    """
    logger.set_verbose(verbose)
    ctx = Context(root=Path(root).resolve())
    args = [package_name] if package_name else []

    try:
        asyncio.run(link(args, ctx, LinkOptions(platforms=platforms)))
    except LinkError as e:
        logger.error(str(e))
        sys.exit(1)


@main.command("config")
@click.option("--platforms", callback=_parse_platforms, default=None,
              help="Only show these platforms (comma-separated)")
@click.option("--root", type=click.Path(file_okay=False), default=".", help="App root directory")
def config_command(platforms, root):
    """Print the detected native project configuration as JSON."""
    ctx = Context(root=Path(root).resolve())
    try:
        detected = get_platforms(ctx.root)
        if platforms:
            detected = pick_platforms(detected, platforms)
        project = get_project_config(ctx, detected)
    except LinkError as e:
        logger.error(str(e))
        sys.exit(1)

    click.echo(json.dumps(project, indent=2, default=_to_json))


if __name__ == "__main__":
    main()
