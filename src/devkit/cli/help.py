"""Help handling that treats a help request as a usage exit."""

from collections.abc import Callable
from typing import Any, TypeVar

import click

from devkit.cli.constants import EXIT_USAGE
from devkit.cli.output import user_output

F = TypeVar("F", bound=Callable[..., Any])


def usage_and_exit(ctx: click.Context) -> None:
    """Print usage for ctx's command to stderr and exit with EXIT_USAGE."""
    user_output(ctx.get_help())
    ctx.exit(EXIT_USAGE)


def _help_callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    usage_and_exit(ctx)


def usage_help_option(func: F) -> F:
    """Add -h/--help that prints usage and exits non-zero.

    Commands using this must be declared with add_help_option=False.
    """
    return click.option(
        "-h",
        "--help",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_help_callback,
        help="Show this message and exit.",
    )(func)
