"""
Packaging service.

The single entry point the CLI (or any other host) calls to run jpackage:
resolve the executable, build the argument list, run it.
"""

from __future__ import annotations

from pathlib import Path

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.config import PackagingConfig
from ...core.models.platform import HostOS
from ...core.models.run import ProcessResult
from .arguments import build_arguments
from .resolver import EXECUTABLE, ExecutableResolver
from .runner import ProcessRunner


class PackagingService:
    """
    Orchestrates one jpackage invocation.

    Every call to execute() is independent; the service keeps no state
    between runs beyond its collaborators.
    """

    def __init__(
        self,
        presenter: IPresenter,
        host_os: HostOS | None = None,
        resolver: ExecutableResolver | None = None,
        runner: ProcessRunner | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize packaging service.

        Args:
            presenter: Receives status lines and the relayed jpackage output
            host_os: Host to build arguments for (defaults to the current host)
            resolver: Executable resolver (created for host_os if omitted)
            runner: Process runner (created around the presenter if omitted)
            logger: Logger for internal diagnostics
        """
        self._presenter = presenter
        self._host_os = host_os or HostOS.current()
        self._logger = logger
        self._resolver = resolver or ExecutableResolver(host_os=self._host_os, logger=logger)
        self._runner = runner or ProcessRunner(sink=presenter.print, logger=logger)

    @property
    def logger(self) -> ILogger:
        """Get logger, falling back to the process-wide one."""
        if self._logger is None:
            from ..logging import get_logger

            self._logger = get_logger()
        return self._logger

    def resolve(self, toolchain_home: str | Path | None = None) -> Path:
        """Resolve the jpackage executable for this host."""
        return self._resolver.resolve(toolchain_home)

    def command(
        self,
        config: PackagingConfig,
        toolchain_home: str | Path | None = None,
    ) -> list[str]:
        """Resolve the executable and build the full command line without running it."""
        executable = self.resolve(toolchain_home)
        return build_arguments(executable, config, self._host_os)

    def execute(
        self,
        config: PackagingConfig,
        toolchain_home: str | Path | None = None,
    ) -> ProcessResult:
        """
        Run jpackage for ``config``.

        Args:
            config: Packaging options
            toolchain_home: Installation root of a managed JDK, if configured

        Returns:
            ProcessResult of the successful run

        Raises:
            ResolutionError: If no jpackage location is available
            ExecutionError: If jpackage exits with a nonzero code
            OSError: If jpackage cannot be spawned
        """
        executable = self.resolve(toolchain_home)
        self._presenter.print(f"Using: {executable}")

        argv = build_arguments(executable, config, self._host_os)
        self.logger.info("Executing %s: %s", EXECUTABLE, argv)

        self._presenter.print(f"{EXECUTABLE} output:")
        result = self._runner.run(argv)
        self.logger.info("%s finished in %.2fs", EXECUTABLE, result.duration)
        return result
