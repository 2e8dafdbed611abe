"""Output presenters for jpackager."""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
