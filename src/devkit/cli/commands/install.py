"""Install command for injecting DevKit helpers into planned Rubies."""

import click

from devkit.cli.error_boundary import cli_error_boundary
from devkit.cli.help import usage_help_option
from devkit.core.context import DevKitContext
from devkit.core.injector import install_plan
from devkit.core.plan_store import load_plan, require_installable_plan


@click.command("install", add_help_option=False)
@usage_help_option
@click.option("--force", "-f", is_flag=True, help="Overwrite existing helper scripts")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: DevKitContext, force: bool) -> None:
    """Install required DevKit executables.

    Every Ruby listed in config.yml is processed in order. Roots that are
    not existing directories are reported and skipped.
    """
    roots = require_installable_plan(load_plan(ctx.plan_path), ctx.plan_path)
    install_plan(ctx, roots, force=force)
