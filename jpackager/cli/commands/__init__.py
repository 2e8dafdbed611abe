"""
Click command implementations for jpackager CLI.

Each module corresponds to one jpackager command (e.g., package.py
implements 'jpackager package').
"""

from .args import args
from .locate import locate
from .package import package

COMMANDS = [
    args,
    locate,
    package,
]

__all__ = [
    "COMMANDS",
    "args",
    "locate",
    "package",
]
