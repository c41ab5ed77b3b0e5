"""Execute a sequence of push/pop/peek operations against a fresh MultiStack."""

import logging
from pathlib import Path

import click

from multistack.cli.config import load_config, merge_overrides
from multistack.cli.context import MultiStackCliContext, pass_context
from multistack.cli.operations import Operation, OperationParseError, parse_operation
from multistack.core.errors import MultiStackError
from multistack.core.multi_stack import MultiStack

logger = logging.getLogger(__name__)


def _parse_operations(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[Operation]:
    operations: list[Operation] = []
    for text in values:
        try:
            operations.append(parse_operation(text))
        except OperationParseError as e:
            raise click.BadParameter(str(e), ctx=ctx, param=param) from e
    return operations


def _apply(stacks: MultiStack[str], operation: Operation) -> str:
    """Run one operation and return the line describing its outcome."""
    if operation.kind == "push":
        assert operation.value is not None
        stacks.insert(operation.value, operation.stack)
        return f"push {operation.stack} {operation.value}"
    if operation.kind == "pop":
        return f"pop {operation.stack} -> {stacks.pop(operation.stack)}"
    return f"peek {operation.stack} -> {stacks.peek(operation.stack)}"


@click.command("run")
@click.option("-n", "--stacks", "number_of_stacks", type=int, help="Number of stacks")
@click.option("-c", "--capacity", type=int, help="Total slot count shared by all stacks")
@click.option(
    "--config-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory containing multistack.toml (defaults to the current directory)",
)
@click.option("--show-storage", is_flag=True, help="Print the buffer after all operations")
@click.argument("operations", nargs=-1, required=True, callback=_parse_operations)
@pass_context
def run_cmd(
    ctx: MultiStackCliContext,
    number_of_stacks: int | None,
    capacity: int | None,
    config_dir: Path | None,
    show_storage: bool,
    operations: list[Operation],
) -> None:
    """Apply OPERATIONS in order to a new MultiStack.

    Each operation is push:STACK:VALUE, pop:STACK or peek:STACK.
    Sizes come from multistack.toml unless --stacks/--capacity override them.

    Example:

      multistack run -n 2 -c 4 push:1:a push:2:b pop:1 peek:2
    """
    try:
        config = merge_overrides(
            load_config(ctx.cwd if config_dir is None else config_dir),
            number_of_stacks=number_of_stacks,
            capacity=capacity,
        )
        stacks: MultiStack[str] = MultiStack(
            number_of_stacks=config.number_of_stacks, capacity=config.capacity
        )
        logger.debug("Created %r", stacks)
        for operation in operations:
            click.echo(_apply(stacks, operation))
    except MultiStackError as e:
        click.echo(click.style("Error: ", fg="red") + e.message, err=True)
        raise SystemExit(1) from e

    if show_storage:
        click.echo(f"storage: {list(stacks.storage)}")
