"""Init command for generating the config.yml install plan."""

import click

from devkit.cli.help import usage_help_option
from devkit.cli.output import user_output
from devkit.core.context import DevKitContext
from devkit.core.locator import locate_installed_runtimes
from devkit.core.plan_store import save_plan


@click.command("init", add_help_option=False)
@usage_help_option
@click.pass_obj
def init_cmd(ctx: DevKitContext) -> None:
    """Prepare DevKit for installation.

    Discovers RubyInstaller-registered Rubies and writes their root
    directories to config.yml, overwriting any existing plan.
    """
    roots = locate_installed_runtimes(ctx.registry, ctx.feedback)
    save_plan(ctx.plan_path, roots)

    user_output(
        "\nInitialization complete! Please review and modify the auto-generated\n"
        f"'{ctx.plan_path.name}' file to ensure it contains the root directories to all\n"
        "of the installed Rubies you want enhanced by the DevKit."
    )
