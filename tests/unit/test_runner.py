"""
Unit tests for ProcessRunner.

The child processes are small Python programs run with the current
interpreter, so these tests exercise real pipes.
"""

import sys
import threading

import pytest

from jpackager.core.exceptions import ExecutionError, OutputRelayError
from jpackager.services.packaging.runner import ProcessRunner, unquote


def _python(code: str) -> list[str]:
    return [sys.executable, "-c", code]


class TestRelay:
    """Every output line reaches the sink."""

    def test_relays_stdout_and_stderr(self) -> None:
        lines: list[str] = []
        runner = ProcessRunner(sink=lines.append)

        result = runner.run(
            _python("import sys; print('out one'); print('err one', file=sys.stderr); print('out two')")
        )

        assert result.exit_code == 0
        assert result.succeeded
        assert sorted(lines) == ["err one", "out one", "out two"]
        assert result.lines_relayed == 3

    def test_stream_order_is_preserved(self) -> None:
        lines: list[str] = []
        runner = ProcessRunner(sink=lines.append)

        runner.run(_python("for i in range(50): print(i)"))

        assert lines == [str(i) for i in range(50)]

    def test_lines_are_relayed_before_exit(self) -> None:
        seen_first_line = threading.Event()

        def sink(line: str) -> None:
            if line == "started":
                seen_first_line.set()

        code = (
            "import sys, time\n"
            "print('started', flush=True)\n"
            "time.sleep(0.5)\n"
        )
        runner_thread = threading.Thread(target=ProcessRunner(sink=sink).run, args=(_python(code),))
        runner_thread.start()
        assert seen_first_line.wait(timeout=5)
        runner_thread.join(timeout=10)

    def test_large_output_on_both_streams_does_not_deadlock(self) -> None:
        lines: list[str] = []
        code = (
            "import sys\n"
            "for i in range(5000):\n"
            "    sys.stderr.write('e' * 100 + '\\n')\n"
            "    sys.stdout.write('o' * 100 + '\\n')\n"
        )

        result = ProcessRunner(sink=lines.append).run(_python(code))

        assert result.lines_relayed == 10000
        assert len(lines) == 10000

    def test_no_stdin_is_supplied(self) -> None:
        lines: list[str] = []
        ProcessRunner(sink=lines.append).run(_python("import sys; print(repr(sys.stdin.read()))"))
        assert lines == ["''"]


class TestExitCode:
    """Nonzero exit codes become ExecutionError."""

    def test_exit_code_one_raises(self) -> None:
        with pytest.raises(ExecutionError) as exc_info:
            ProcessRunner(sink=lambda line: None).run(_python("import sys; sys.exit(1)"))

        assert exc_info.value.exit_code == 1
        assert "jpackage" in str(exc_info.value)

    def test_output_is_relayed_even_on_failure(self) -> None:
        lines: list[str] = []
        with pytest.raises(ExecutionError):
            ProcessRunner(sink=lines.append).run(
                _python("import sys; print('bad input', file=sys.stderr); sys.exit(3)")
            )
        assert lines == ["bad input"]

    def test_spawn_failure_propagates(self, tmp_path) -> None:
        with pytest.raises(OSError):
            ProcessRunner(sink=lambda line: None).run([str(tmp_path / "missing" / "jpackage")])


class TestSinkFailure:
    """A sink that raises fails the run instead of being ignored."""

    @staticmethod
    def _closed_stdout(line: str) -> None:
        raise BrokenPipeError(32, "Broken pipe")

    def test_sink_error_is_raised_after_exit(self) -> None:
        runner = ProcessRunner(sink=self._closed_stdout)

        with pytest.raises(OutputRelayError) as exc_info:
            runner.run(_python("print('x')"))

        assert exc_info.value.stream == "stdout"
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)

    def test_stream_is_drained_after_sink_error(self) -> None:
        calls: list[str] = []

        def sink(line: str) -> None:
            calls.append(line)
            raise BrokenPipeError(32, "Broken pipe")

        code = "for i in range(20000): print('o' * 100)"

        with pytest.raises(OutputRelayError):
            ProcessRunner(sink=sink).run(_python(code))

        assert len(calls) == 1

    def test_nonzero_exit_wins_over_sink_error(self) -> None:
        runner = ProcessRunner(sink=self._closed_stdout)

        with pytest.raises(ExecutionError) as exc_info:
            runner.run(_python("import sys; print('x'); sys.exit(2)"))

        assert exc_info.value.exit_code == 2
        assert isinstance(exc_info.value.__cause__, BrokenPipeError)


class TestUnquote:
    def test_strips_surrounding_quotes(self) -> None:
        assert unquote('"/opt/My JDK/bin/jpackage"') == "/opt/My JDK/bin/jpackage"

    def test_leaves_plain_path(self) -> None:
        assert unquote("/opt/jdk/bin/jpackage") == "/opt/jdk/bin/jpackage"
