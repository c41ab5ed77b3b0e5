"""Context object shared by multistack CLI commands."""

from dataclasses import dataclass
from pathlib import Path

import click


@dataclass(frozen=True)
class MultiStackCliContext:
    """Context object for multistack CLI commands.

    Attributes:
        cwd: Directory used to look up multistack.toml when --config-dir is not given
    """

    cwd: Path


pass_context = click.make_pass_decorator(MultiStackCliContext)
