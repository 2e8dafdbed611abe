"""
Packaging services: locate jpackage, build its arguments, run it.
"""

from .arguments import add_parameter, build_arguments, escape
from .resolver import EXECUTABLE, ExecutableResolver, java_home_from_environment
from .runner import ProcessRunner
from .service import PackagingService

__all__ = [
    "EXECUTABLE",
    "ExecutableResolver",
    "PackagingService",
    "ProcessRunner",
    "add_parameter",
    "build_arguments",
    "escape",
    "java_home_from_environment",
]
