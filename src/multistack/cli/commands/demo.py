"""Sample scenario: three stacks sharing a buffer of ten slots."""

import click

from multistack.core.errors import MultiStackError
from multistack.core.multi_stack import MultiStack


@click.command("demo")
def demo_cmd() -> None:
    """Run the fixed three-stack sample scenario and print each result.

    Stack 1 is filled until it runs out of slots, stacks 2 and 3 get a few
    values, then stack 2 is popped empty and every stack is peeked.
    """
    stacks: MultiStack[int] = MultiStack(number_of_stacks=3, capacity=10)

    for value in (1, 2, 3, 4, 5):
        try:
            stacks.insert(value, 1)
        except MultiStackError as e:
            click.echo(f"insert {value} into stack 1 failed: {e.message}")
            continue
        click.echo(f"insert {value} into stack 1")

    for value in (1, 2):
        stacks.insert(value, 2)
        click.echo(f"insert {value} into stack 2")

    stacks.insert(1, 3)
    click.echo("insert 1 into stack 3")

    for _ in range(3):
        click.echo(f"pop stack 2 -> {stacks.pop(2)}")

    click.echo(f"storage: {list(stacks.storage)}")

    for stack in (1, 2, 3):
        click.echo(f"peek stack {stack} -> {stacks.peek(stack)}")
