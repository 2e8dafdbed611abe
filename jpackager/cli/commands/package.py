"""
Native Click implementation of the package command.

Usage: jpackager package [options]
"""

from pathlib import Path

import click

from ...core.models.config import ImageType
from ..context import JPackagerContext
from ._common import apply_overrides, load_cli_settings, report_errors

IMAGE_TYPES = [t.value for t in ImageType if t is not ImageType.DEFAULT]


@click.command("package")
@click.option("-t", "--type", "image_type", type=click.Choice(IMAGE_TYPES), help="Package type")
@click.option("-n", "--name", "app_name", help="Application name")
@click.option("--app-version", help="Application version")
@click.option("-d", "--dest", "destination", help="Output directory")
@click.option("-v", "--verbose", is_flag=True, default=None, help="Pass --verbose to jpackage")
@click.option(
    "--toolchain-home",
    type=click.Path(file_okay=False, path_type=Path),
    help="JDK installation to take jpackage from",
)
@click.option("--dry-run", is_flag=True, help="Print the command instead of running it")
@click.pass_obj
def package(
    ctx: JPackagerContext,
    image_type: str | None,
    app_name: str | None,
    app_version: str | None,
    destination: str | None,
    verbose: bool | None,
    toolchain_home: Path | None,
    dry_run: bool,
) -> None:
    """Build the application package with jpackage.

    Options are read from .jpackager.toml (or [tool.jpackager] in
    pyproject.toml); command-line options override them. Only the
    [package.windows], [package.mac] or [package.linux] table matching
    this host is passed on.

    \b
    Examples:
        jpackager package
        jpackager package --type app-image --dest build/dist
        jpackager package --dry-run
    """
    from ...presenters.console import ConsolePresenter
    from ...services.packaging import PackagingService

    presenter = ConsolePresenter()

    with report_errors(presenter):
        settings = load_cli_settings(ctx, toolchain_home)
        if settings.config_error:
            presenter.print_warning(settings.config_error)

        apply_overrides(
            settings,
            type=image_type,
            app_name=app_name,
            app_version=app_version,
            destination=destination,
            verbose=verbose,
        )

        service = PackagingService(presenter, host_os=ctx.host_os)

        if dry_run:
            click.echo(" ".join(service.command(settings.package, settings.toolchain_home)))
            return

        service.execute(settings.package, settings.toolchain_home)

    presenter.print_success("jpackage finished successfully")
