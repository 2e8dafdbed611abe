"""
Click-based CLI for jpackager.

This module provides the main Click command group and serves as the
entry point for the jpackager CLI.

Usage:
    from jpackager.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from .context import JPackagerContext

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("jpackager")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="jpackager")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (default: nearest .jpackager.toml or pyproject.toml [tool.jpackager])",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """jpackager - run the JDK jpackage tool from a declarative config

    \b
    Commands:
        jpackager package      Build the package with jpackage
        jpackager args         Print the jpackage command line
        jpackager locate       Print the jpackage executable in use
    """
    ctx.ensure_object(dict)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = JPackagerContext.create(config_path=config_path)


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "JPackagerContext",
    "__version__",
    "cli",
    "register_commands",
]
