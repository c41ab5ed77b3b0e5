"""Several fixed-capacity LIFO stacks sharing one interleaved buffer.

See `multistack --help` for the demonstration CLI.
"""

from multistack.core.errors import (
    InvalidConfigurationError,
    MultiStackError,
    StackIndexOutOfBoundsError,
    StackOutOfCapacityError,
)
from multistack.core.multi_stack import MultiStack

__all__ = [
    "InvalidConfigurationError",
    "MultiStack",
    "MultiStackError",
    "StackIndexOutOfBoundsError",
    "StackOutOfCapacityError",
]


def main() -> None:
    """CLI entry point used by the `multistack` console script."""
    from multistack.cli.cli import cli

    cli()
