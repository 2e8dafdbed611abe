"""
jpackager - run the JDK jpackage tool from a declarative configuration.

Typical use from Python:

    from jpackager import PackagingConfig, PackagingService
    from jpackager.presenters import ConsolePresenter

    config = PackagingConfig(app_name="Demo", app_version="1.0")
    PackagingService(ConsolePresenter()).execute(config)
"""

from .core.exceptions import (
    ExecutionError,
    JPackagerException,
    OutputRelayError,
    ResolutionError,
)
from .core.models import HostOS, ImageType, PackagingConfig, ProcessResult
from .services.packaging import PackagingService, build_arguments

__all__ = [
    "ExecutionError",
    "HostOS",
    "ImageType",
    "JPackagerException",
    "OutputRelayError",
    "PackagingConfig",
    "PackagingService",
    "ProcessResult",
    "ResolutionError",
    "build_arguments",
]
