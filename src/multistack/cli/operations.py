"""Parsing of command-line operation strings.

Syntax:
  push:STACK:VALUE   insert VALUE (kept as a string) into STACK
  pop:STACK          remove and print the top of STACK
  peek:STACK         print the top of STACK without removing it
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

OperationKind = Literal["push", "pop", "peek"]


@dataclass(frozen=True)
class Operation:
    """One parsed operation.

    Attributes:
        kind: Which MultiStack method to call
        stack: 1-based stack index, not yet range-checked
        value: Value to insert; None for pop and peek
    """

    kind: OperationKind
    stack: int
    value: str | None


class OperationParseError(ValueError):
    """Operation string does not match the expected syntax."""


def parse_operation(text: str) -> Operation:
    """Parse a single `push:STACK:VALUE`, `pop:STACK` or `peek:STACK` string.

    The value of a push may itself contain colons.

    Raises:
        OperationParseError: If the kind is unknown, the stack is not an
            integer, or the number of fields is wrong
    """
    kind, sep, rest = text.partition(":")
    if not sep:
        raise OperationParseError(f"missing stack index in {text!r}")

    if kind == "push":
        stack_text, sep, value = rest.partition(":")
        if not sep:
            raise OperationParseError(f"push needs a value: {text!r}")
        return Operation(kind="push", stack=_parse_stack(stack_text, text), value=value)

    if kind == "pop" or kind == "peek":
        if ":" in rest:
            raise OperationParseError(f"{kind} takes only a stack index: {text!r}")
        return Operation(kind=kind, stack=_parse_stack(rest, text), value=None)

    raise OperationParseError(f"unknown operation {kind!r} in {text!r}")


def _parse_stack(stack_text: str, text: str) -> int:
    if not stack_text.removeprefix("-").isdecimal():
        raise OperationParseError(f"stack index must be an integer in {text!r}")
    return int(stack_text)
