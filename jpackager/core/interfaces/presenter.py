"""
Presenter interface for user-facing output.

Relayed jpackage output and status lines go through an IPresenter so the
CLI and the tests can swap where they end up.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """Interface for output presentation."""

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        pass

    @abstractmethod
    def print_success(self, message: str) -> None:
        """Print a success message."""
        pass
