import logging
from pathlib import Path

import click

from multistack.cli.commands.demo import demo_cmd
from multistack.cli.commands.run import run_cmd
from multistack.cli.context import MultiStackCliContext

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="multistack")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Drive several stacks that share one fixed-capacity buffer."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = MultiStackCliContext(cwd=Path.cwd())


cli.add_command(demo_cmd)
cli.add_command(run_cmd)
