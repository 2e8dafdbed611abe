"""
Entry point for the `jpackager` command-line interface.

jpackager locates the JDK's jpackage tool and runs it with flags built
from a declarative configuration file.

This module provides the main() entry point that delegates to the Click CLI.
"""


def main():
    """Main entry point for the jpackager CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
