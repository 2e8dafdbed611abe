"""
Argument builder for jpackage command lines.

Pure functions only: the same executable, config and host always give the
same token list.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ...core.models.config import FlagValue, ImageType, PackagingConfig
from ...core.models.platform import HostOS


def escape(value: str) -> str:
    """Wrap a value in double quotes when it contains a space."""
    if " " in value:
        return f'"{value}"'
    return value


def add_parameter(parameters: list[str], flag: str, value: str | bool) -> list[str]:
    """
    Append one flag to ``parameters`` unless its value is a zero value.

    Booleans become a bare flag when true. Strings become ``flag value``
    when non-empty.
    """
    if isinstance(value, bool):
        if value:
            parameters.append(flag)
    elif value:
        parameters.extend([flag, value])
    return parameters


def add_parameters(parameters: list[str], flags: Iterable[FlagValue]) -> list[str]:
    for flag, value in flags:
        add_parameter(parameters, flag, value)
    return parameters


def build_arguments(
    executable: str | Path,
    config: PackagingConfig,
    host_os: HostOS,
) -> list[str]:
    """
    Build the full jpackage command line.

    Token 0 is the executable, then the generic flags, then the repeated
    --java-options and --arguments pairs, then the flags of the platform
    group matching ``host_os``. Groups for other hosts contribute nothing.

    Args:
        executable: Resolved jpackage path
        config: Packaging options
        host_os: Host the command will run on

    Returns:
        Ordered list of command-line tokens
    """
    parameters = [escape(str(executable))]

    image_type = ImageType(config.type)
    if image_type != ImageType.DEFAULT:
        add_parameter(parameters, "--type", image_type.value)

    add_parameters(parameters, config.generic_flags())

    for option in config.java_options:
        add_parameter(parameters, "--java-options", escape(option))

    for argument in config.arguments:
        add_parameter(parameters, "--arguments", escape(argument))

    platform_options = config.platform_options(host_os)
    if platform_options is not None:
        add_parameters(parameters, platform_options.flags())

    return parameters
