"""
Shared pytest fixtures for jpackager tests.

This module provides:
- isolated_environment: keeps host JPACKAGER_* / JAVA_HOME values and the
  log file out of every test
- fake_jdk: a JDK home whose bin/jpackage is a small Python script
- presenter: an IPresenter that records what it was asked to print
"""

import os
import stat
import sys
from pathlib import Path

import pytest

from jpackager.core.interfaces.presenter import IPresenter
from jpackager.services.logging import JPackagerLogger, reset_logging

FAKE_JPACKAGE = """\
#!{python}
import os
import sys

print("jpackage args: " + " ".join(sys.argv[1:]))
print("warning from jpackage", file=sys.stderr)
sys.exit(int(os.environ.get("FAKE_JPACKAGE_EXIT", "0")))
"""

class RecordingPresenter(IPresenter):
    """Presenter that keeps every message instead of printing it."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def print(self, message: str) -> None:
        self.lines.append(message)

    def print_error(self, message: str) -> None:
        self.errors.append(message)

    def print_warning(self, message: str) -> None:
        self.warnings.append(message)

    def print_success(self, message: str) -> None:
        self.lines.append(message)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test without the caller's jpackager configuration."""
    for name in list(os.environ):
        if name.startswith("JPACKAGER_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("JAVA_HOME", raising=False)
    monkeypatch.delenv("FAKE_JPACKAGE_EXIT", raising=False)
    monkeypatch.setattr(JPackagerLogger, "DEFAULT_LOG_FILE", tmp_path / "logs" / "jpackager.log")
    yield
    reset_logging()


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def fake_jdk(tmp_path: Path) -> Path:
    """
    Create a JDK home containing an executable bin/jpackage.

    The script echoes its arguments on stdout, writes one line to stderr and
    exits with $FAKE_JPACKAGE_EXIT (default 0).

    Returns:
        Path to the JDK home
    """
    home = tmp_path / "jdk"
    script = home / "bin" / "jpackage"
    script.parent.mkdir(parents=True)
    script.write_text(FAKE_JPACKAGE.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return home
