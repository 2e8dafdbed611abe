"""
Native Click implementation of the args command.

Usage: jpackager args [--host windows|macos|linux]
"""

from pathlib import Path

import click

from ...core.models.platform import HostOS
from ..context import JPackagerContext
from ._common import load_cli_settings, report_errors

HOSTS = [h.value for h in HostOS if h is not HostOS.OTHER]


@click.command("args")
@click.option("--host", type=click.Choice(HOSTS), help="Build the command line for another host")
@click.option(
    "--toolchain-home",
    type=click.Path(file_okay=False, path_type=Path),
    help="JDK installation to take jpackage from",
)
@click.pass_obj
def args(ctx: JPackagerContext, host: str | None, toolchain_home: Path | None) -> None:
    """Print the jpackage command line, one token per line.

    Nothing is executed. Use --host to preview the flags another
    operating system would receive.
    """
    from ...presenters.console import ConsolePresenter
    from ...services.packaging import PackagingService

    presenter = ConsolePresenter()
    host_os = HostOS(host) if host else ctx.host_os

    with report_errors(presenter):
        settings = load_cli_settings(ctx, toolchain_home)
        service = PackagingService(presenter, host_os=host_os)
        tokens = service.command(settings.package, settings.toolchain_home)

    for token in tokens:
        click.echo(token)
