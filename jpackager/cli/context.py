"""
Click context extension for jpackager CLI.

Provides JPackagerContext dataclass that holds jpackager-specific data
passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from ..core.models.platform import HostOS


@dataclass
class JPackagerContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory; jpackage is spawned here
        config_path: Explicit config file from --config (None to search)
        host_os: Host the CLI is running on
        is_interactive: Whether stdout is a TTY
    """

    cwd: Path
    config_path: Path | None
    host_os: HostOS
    is_interactive: bool

    @classmethod
    def create(cls, config_path: Path | None = None, cwd: Path | None = None) -> JPackagerContext:
        """Create a JPackagerContext for the current environment.

        Args:
            config_path: Explicit config file, if one was given
            cwd: Working directory override (defaults to Path.cwd())

        Returns:
            Configured JPackagerContext instance
        """
        return cls(
            cwd=cwd or Path.cwd(),
            config_path=config_path,
            host_os=HostOS.current(),
            is_interactive=sys.stdout.isatty(),
        )
