"""Output utilities for CLI commands with clear intent.

user_output writes operator-facing messages to stderr; machine_output writes
results meant to be read or piped (such as the plan listing) to stdout.
"""

import click


def user_output(message: str = "") -> None:
    """Write an informational message for the operator to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write result data to stdout."""
    click.echo(message)
