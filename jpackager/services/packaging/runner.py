"""
Process runner for jpackage.

Spawns the command, relays stdout and stderr line by line while it runs,
and turns a nonzero exit code into an ExecutionError.
"""

from __future__ import annotations

import subprocess
import threading
import time
from collections.abc import Callable
from typing import IO

from ...core.exceptions import ExecutionError, OutputRelayError
from ...core.interfaces.logger import ILogger
from ...core.models.run import ProcessResult

OutputSink = Callable[[str], None]


def unquote(token: str) -> str:
    """Strip the double quotes the argument builder puts around paths with spaces."""
    if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
        return token[1:-1]
    return token


class ProcessRunner:
    """
    Runs one jpackage process to completion.

    stdout and stderr are drained on separate threads so a child blocked
    on a full stderr pipe can never stall the stdout reader. Lines of one
    stream keep their order; the two streams may interleave.
    """

    def __init__(self, sink: OutputSink | None = None, logger: ILogger | None = None) -> None:
        """
        Initialize process runner.

        Args:
            sink: Called once per output line (defaults to print)
            logger: Logger for internal diagnostics
        """
        self._sink = sink or print
        self._sink_lock = threading.Lock()
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Get logger, falling back to the process-wide one."""
        if self._logger is None:
            from ..logging import get_logger

            self._logger = get_logger()
        return self._logger

    def run(self, argv: list[str]) -> ProcessResult:
        """
        Execute ``argv`` without a shell and wait for it to exit.

        Args:
            argv: Full command line; token 0 is the program

        Returns:
            ProcessResult for a zero exit code

        Raises:
            ExecutionError: If the process exits with a nonzero code
            OutputRelayError: If the sink failed while relaying a line
            OSError: If the process cannot be spawned
        """
        self.logger.debug("ProcessRunner.run: argv=%s", argv)
        start_time = time.time()

        proc = subprocess.Popen(
            argv,
            executable=unquote(argv[0]),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
        self.logger.debug("Process started: pid=%d", proc.pid)

        counts = {"stdout": 0, "stderr": 0}
        failures: dict[str, Exception] = {}
        readers = [
            threading.Thread(
                target=self._relay,
                args=(proc.stdout, "stdout", counts, failures),
                name="jpackager-stdout",
                daemon=True,
            ),
            threading.Thread(
                target=self._relay,
                args=(proc.stderr, "stderr", counts, failures),
                name="jpackager-stderr",
                daemon=True,
            ),
        ]
        for reader in readers:
            reader.start()

        exit_code = proc.wait()
        for reader in readers:
            reader.join()

        duration = time.time() - start_time
        self.logger.debug("Process exited: code=%d, duration=%.2fs", exit_code, duration)

        relay_failure = next(iter(failures.items()), None)
        if exit_code != 0:
            raise ExecutionError(
                exit_code,
                command=" ".join(argv),
                cause=relay_failure[1] if relay_failure else None,
            )
        if relay_failure is not None:
            stream, error = relay_failure
            raise OutputRelayError(stream, cause=error)

        return ProcessResult(
            exit_code=exit_code,
            command=list(argv),
            duration=duration,
            lines_relayed=counts["stdout"] + counts["stderr"],
        )

    def _relay(
        self,
        stream: IO[str] | None,
        name: str,
        counts: dict[str, int],
        failures: dict[str, Exception],
    ) -> None:
        if stream is None:
            return
        with stream:
            for line in stream:
                # After a sink failure the rest of the stream is drained
                # unrelayed so the child never blocks on a full pipe.
                if name in failures:
                    continue
                try:
                    with self._sink_lock:
                        self._sink(line.rstrip("\r\n"))
                except Exception as e:
                    self.logger.error("Relaying %s failed: %s", name, e)
                    failures[name] = e
                    continue
                counts[name] += 1
