import logging
from pathlib import Path

import click

from devkit import __version__
from devkit.cli.commands.init import init_cmd
from devkit.cli.commands.install import install_cmd
from devkit.cli.commands.review import review_cmd
from devkit.cli.help import usage_and_exit, usage_help_option
from devkit.core.context import create_context


@click.group(invoke_without_command=True, add_help_option=False)
@usage_help_option
@click.version_option(version=__version__)
@click.option(
    "--devkit-root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="DEVKIT_ROOT",
    default=None,
    help="DevKit installation directory (defaults to the current directory)",
)
@click.option("--debug", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx: click.Context, devkit_root: Path | None, debug: bool) -> None:
    """Configures an MSYS/MinGW based Development Kit (DevKit) for
    each of the Ruby installations on your Windows system. The
    DevKit enables you to build many of the available native
    RubyGems that don't yet have a binary gem.

    Run 'dk init', then 'dk review', then 'dk install'.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if ctx.invoked_subcommand is None:
        usage_and_exit(ctx)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(devkit_root=devkit_root)


cli.add_command(init_cmd)
cli.add_command(review_cmd)
cli.add_command(install_cmd)


def main() -> None:
    """CLI entry point used by the `dk` console script."""
    cli()
