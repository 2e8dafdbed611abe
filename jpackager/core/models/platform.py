"""Host operating system detection."""

from __future__ import annotations

import platform
from enum import Enum


class HostOS(str, Enum):
    """Operating system a packaging run executes on."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    # No platform-specific jpackage flags apply
    OTHER = "other"

    @classmethod
    def current(cls) -> HostOS:
        """Detect the host the interpreter is running on."""
        return cls.from_system_name(platform.system())

    @classmethod
    def from_system_name(cls, name: str) -> HostOS:
        """Map a ``platform.system()`` style name to a HostOS."""
        lowered = name.lower()
        if lowered.startswith(("windows", "cygwin", "msys")):
            return cls.WINDOWS
        if lowered == "darwin":
            return cls.MACOS
        if lowered == "linux":
            return cls.LINUX
        return cls.OTHER

    @property
    def is_windows(self) -> bool:
        return self is HostOS.WINDOWS
