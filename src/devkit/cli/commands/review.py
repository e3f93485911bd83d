"""Review command for displaying the install plan."""

import click

from devkit.cli.error_boundary import cli_error_boundary
from devkit.cli.help import usage_help_option
from devkit.cli.output import machine_output, user_output
from devkit.core.context import DevKitContext
from devkit.core.plan_store import load_plan, resolve_plan_entry


@click.command("review", add_help_option=False)
@usage_help_option
@click.pass_obj
@cli_error_boundary
def review_cmd(ctx: DevKitContext) -> None:
    """Review DevKit install plan."""
    roots = load_plan(ctx.plan_path)

    user_output(
        f"Based upon the settings in the '{ctx.plan_path.name}' file generated\n"
        "from running 'dk init' and any of your customizations,\n"
        "DevKit functionality will be injected into the following Rubies\n"
        "when you run 'dk install'.\n"
    )
    for entry in roots:
        resolved = resolve_plan_entry(entry)
        machine_output(str(resolved) if resolved is not None else entry)
