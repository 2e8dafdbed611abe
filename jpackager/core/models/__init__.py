"""
Pydantic models for jpackager.

This package provides typed, validated models for packaging configuration.
All models use Pydantic v2.
"""

from .base import ImmutableModel, JPackagerBaseModel
from .config import (
    ConfigBaseModel,
    FlagValue,
    ImageType,
    LinuxOptions,
    LoggingConfig,
    MacOptions,
    PackagingConfig,
    PlatformOptions,
    WindowsOptions,
)
from .platform import HostOS
from .run import ProcessResult

__all__ = [
    "ConfigBaseModel",
    "FlagValue",
    "HostOS",
    "ImageType",
    "ImmutableModel",
    "JPackagerBaseModel",
    "LinuxOptions",
    "LoggingConfig",
    "MacOptions",
    "PackagingConfig",
    "PlatformOptions",
    "ProcessResult",
    "WindowsOptions",
]
