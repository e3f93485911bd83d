"""Error boundary handling for CLI commands.

This module provides a decorator to catch plan errors at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from devkit.cli.constants import EXIT_CONFIG, INVALID_PLAN_DIRECTIVE, MISSING_PLAN_DIRECTIVE
from devkit.cli.output import user_output
from devkit.core.plan_store import InvalidPlanError, PlanNotFoundError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns plan errors into a directive and EXIT_CONFIG.

    Catches:
        - PlanNotFoundError: config.yml missing
        - InvalidPlanError: config.yml unreadable, not a list, or empty

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PlanNotFoundError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            user_output(MISSING_PLAN_DIRECTIVE)
            raise SystemExit(EXIT_CONFIG) from None
        except InvalidPlanError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            user_output(INVALID_PLAN_DIRECTIVE)
            raise SystemExit(EXIT_CONFIG) from None

    return wrapper  # type: ignore[return-value]
