"""
Native Click implementation of the locate command.

Usage: jpackager locate [--toolchain-home PATH]
"""

from pathlib import Path

import click

from ..context import JPackagerContext
from ._common import load_cli_settings, report_errors


@click.command("locate")
@click.option(
    "--toolchain-home",
    type=click.Path(file_okay=False, path_type=Path),
    help="JDK installation to take jpackage from",
)
@click.pass_obj
def locate(ctx: JPackagerContext, toolchain_home: Path | None) -> None:
    """Print the jpackage executable that package would run."""
    from ...presenters.console import ConsolePresenter
    from ...services.packaging import PackagingService

    presenter = ConsolePresenter()

    with report_errors(presenter):
        settings = load_cli_settings(ctx, toolchain_home)
        executable = PackagingService(presenter, host_os=ctx.host_os).resolve(
            settings.toolchain_home
        )

    click.echo(str(executable))
