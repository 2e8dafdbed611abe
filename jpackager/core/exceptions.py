"""
Custom exception hierarchy for jpackager.

Every failure that can stop a packaging run is raised as a subclass of
JPackagerException so the CLI can report it and pick an exit code.
"""

from __future__ import annotations


class JPackagerException(Exception):
    """
    Base exception for all jpackager errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, exit codes, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class JPackagerConfigError(JPackagerException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(JPackagerConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, missing files, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(JPackagerConfigError, ValueError):
    """
    Invalid configuration value.

    Inherits from ValueError so callers validating input can catch either.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Packaging Errors
# =============================================================================


class ResolutionError(JPackagerException):
    """
    No usable jpackage location could be determined.

    Raised when neither a toolchain home nor a runtime home is available.
    The run is aborted before anything is spawned.
    """

    def __init__(
        self,
        message: str = "no Java installation available",
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class ExecutionError(JPackagerException):
    """
    jpackage ran to completion but returned a nonzero exit code.

    The child's exit code is kept on the instance and reused as the CLI
    exit code.
    """

    def __init__(
        self,
        exit_code: int,
        *,
        message: str = "Error while executing jpackage",
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["exit_code"] = exit_code
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)
        self.exit_code = exit_code


class OutputRelayError(JPackagerException):
    """
    jpackage output could not be written to the output sink.

    The process itself may have succeeded; its output was lost.
    """

    def __init__(
        self,
        stream: str,
        *,
        message: str = "Failed to relay jpackage output",
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        ctx["stream"] = stream
        super().__init__(message, context=ctx, cause=cause)
        self.stream = stream
