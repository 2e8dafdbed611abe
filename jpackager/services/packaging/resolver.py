"""
Executable resolver for the jpackage binary.

Looks in the configured toolchain home first and falls back to the
runtime home (JAVA_HOME by default).
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from ...core.exceptions import ResolutionError
from ...core.interfaces.logger import ILogger
from ...core.models.platform import HostOS

EXECUTABLE = "jpackage"

RuntimeHomeProvider = Callable[[], str | None]


def java_home_from_environment() -> str | None:
    """Return JAVA_HOME, treating an empty value as unset."""
    return os.environ.get("JAVA_HOME") or None


class ExecutableResolver:
    """
    Determines the absolute path of the jpackage executable.

    Candidates, in order:
    1. <toolchain home>/bin/jpackage, only if the file exists
    2. <runtime home>/bin/jpackage, returned without an existence check;
       a missing file surfaces later as a spawn failure
    """

    def __init__(
        self,
        host_os: HostOS | None = None,
        runtime_home_provider: RuntimeHomeProvider | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize the resolver.

        Args:
            host_os: Host to resolve for (defaults to the current host)
            runtime_home_provider: Callable returning the runtime home
                (defaults to reading JAVA_HOME)
            logger: Logger for internal diagnostics
        """
        self._host_os = host_os or HostOS.current()
        self._runtime_home_provider = runtime_home_provider or java_home_from_environment
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, falling back to the process-wide one."""
        if self._logger is None:
            from ..logging import get_logger

            self._logger = get_logger()
        return self._logger

    def executable_path(self, home: str | Path) -> Path:
        """Build <home>/bin/jpackage, with .exe on Windows."""
        name = f"{EXECUTABLE}.exe" if self._host_os.is_windows else EXECUTABLE
        return Path(home) / "bin" / name

    def resolve(self, toolchain_home: str | Path | None = None) -> Path:
        """
        Resolve the jpackage executable.

        Args:
            toolchain_home: Installation root of a managed JDK, if configured

        Returns:
            Path to the executable

        Raises:
            ResolutionError: If neither a toolchain nor a runtime home is available
        """
        executable = self._from_toolchain(toolchain_home)
        if executable is None:
            executable = self._from_runtime_home(toolchain_home)
        return executable

    def _from_toolchain(self, toolchain_home: str | Path | None) -> Path | None:
        self.logger.info("Looking for %s in toolchain", EXECUTABLE)
        if not toolchain_home:
            self.logger.warning("Toolchain is not configured")
            return None

        executable = self.executable_path(toolchain_home)
        if executable.exists():
            self.logger.debug("Found %s at: %s", EXECUTABLE, executable)
            return executable

        self.logger.warning("File %s does not exist", executable)
        return None

    def _from_runtime_home(self, toolchain_home: str | Path | None) -> Path:
        self.logger.info("Getting %s from runtime home", EXECUTABLE)
        runtime_home = self._runtime_home_provider()
        if not runtime_home:
            raise ResolutionError(
                context={
                    "toolchain_home": str(toolchain_home) if toolchain_home else None,
                    "runtime_home": None,
                }
            )
        return self.executable_path(runtime_home)
