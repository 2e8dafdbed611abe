"""
Run/execution domain models.

Provides Pydantic models describing a finished jpackage process.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

from .base import ImmutableModel


class ProcessResult(ImmutableModel):
    """Result of one jpackage process execution."""

    exit_code: int
    command: Annotated[list[str], Field(min_length=1)]
    duration: Annotated[float, Field(ge=0)]
    lines_relayed: Annotated[int, Field(ge=0)] = 0

    @property
    def succeeded(self) -> bool:
        """True when the process exited with status 0."""
        return self.exit_code == 0
