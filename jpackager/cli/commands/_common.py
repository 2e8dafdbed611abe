"""
Shared helpers for the package, args and locate commands.

All three load the same settings, configure logging from them and report
jpackager errors the same way.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from pydantic import ValidationError
from pydantic_settings import SettingsError

from ...core.exceptions import (
    ConfigFileError,
    ConfigValidationError,
    ExecutionError,
    JPackagerException,
)

if TYPE_CHECKING:
    from ...core.interfaces.presenter import IPresenter
    from ...core.settings import JPackagerSettings
    from ..context import JPackagerContext


def load_cli_settings(
    ctx: JPackagerContext,
    toolchain_home: Path | None = None,
) -> JPackagerSettings:
    """
    Load settings for a command and configure logging from them.

    Args:
        ctx: JPackagerContext with cwd and the optional --config path
        toolchain_home: --toolchain-home override

    Returns:
        Loaded settings

    Raises:
        ConfigFileError: If an explicitly given config file cannot be used
        ConfigValidationError: If a config value is invalid
    """
    from ...core.settings import load_settings
    from ...services.logging import configure_logging

    overrides: dict[str, Any] = {}
    if toolchain_home is not None:
        overrides["toolchain_home"] = str(toolchain_home)

    try:
        settings = load_settings(
            config_path=ctx.config_path,
            start_dir=str(ctx.cwd),
            **overrides,
        )
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigValidationError(
            f"Invalid configuration: {first['msg']}",
            key=key,
            cause=e,
        ) from e
    except SettingsError as e:
        raise ConfigValidationError(f"Invalid configuration: {e}", cause=e) from e

    if settings.config_error and ctx.config_path is not None:
        raise ConfigFileError(settings.config_error, file_path=str(ctx.config_path))

    configure_logging(settings.logging)
    return settings


def apply_overrides(settings: JPackagerSettings, **values: Any) -> None:
    """Assign every non-None value onto settings.package."""
    for field, value in values.items():
        if value is not None:
            try:
                setattr(settings.package, field, value)
            except ValidationError as e:
                raise ConfigValidationError(
                    f"Invalid value for {field}: {e.errors()[0]['msg']}",
                    key=field,
                    value=str(value),
                    cause=e,
                ) from e


@contextmanager
def report_errors(presenter: IPresenter) -> Iterator[None]:
    """
    Turn jpackager failures into CLI exits.

    ExecutionError exits with the jpackage exit code; every other
    JPackagerException and spawn failures exit with 1.
    """
    try:
        yield
    except ExecutionError as e:
        presenter.print_error(str(e))
        raise SystemExit(exit_status(e.exit_code)) from e
    except JPackagerException as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Failed to start jpackage: {e}") from e


def exit_status(exit_code: int) -> int:
    """
    Map a child exit code onto a shell exit status.

    Popen reports a child killed by signal N as -N; shells report that
    as 128 + N.
    """
    if exit_code < 0:
        return 128 + abs(exit_code)
    return exit_code
