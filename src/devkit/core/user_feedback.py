"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from devkit.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Core operations report progress through ctx.feedback instead of printing
    directly, so tests can assert on the messages that were emitted.

    Usage:
        ctx.feedback.info(f"Installing {target}")
        ctx.feedback.warning("DevKit helper library already exists, skipping.")
        ctx.feedback.error(f"Invalid directory '{root}', skipping.")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a warning about a conflict that was resolved by policy."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with a level prefix and color."""

    def info(self, message: str) -> None:
        user_output(click.style("[INFO] ", fg="cyan") + message)

    def warning(self, message: str) -> None:
        user_output(click.style("[WARN] ", fg="yellow") + message)

    def error(self, message: str) -> None:
        user_output(click.style("[ERROR] ", fg="red") + message)
