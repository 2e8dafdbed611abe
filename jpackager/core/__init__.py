"""
Core package for jpackager.

Holds the models, settings, interfaces and exceptions shared by the
services and the CLI.
"""
