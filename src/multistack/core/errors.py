"""Exceptions raised by MultiStack operations.

An empty stack is not an error: pop and peek return None for it. These
exceptions cover misuse (a stack index that does not exist) and per-stack
exhaustion of the shared buffer.
"""


class MultiStackError(Exception):
    """Base class for all MultiStack failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StackIndexOutOfBoundsError(MultiStackError, IndexError):
    """Stack index outside [1, number_of_stacks]."""

    def __init__(self, stack: int, number_of_stacks: int) -> None:
        super().__init__(
            f"Stack index {stack} is out of bounds (valid range: 1..{number_of_stacks})"
        )
        self.stack = stack
        self.number_of_stacks = number_of_stacks


class StackOutOfCapacityError(MultiStackError):
    """Every slot belonging to the target stack is occupied.

    Other stacks may still have free slots; exhaustion is per stack.
    """

    def __init__(self, stack: int, capacity: int) -> None:
        super().__init__(f"Stack {stack} has no free slots left (capacity: {capacity})")
        self.stack = stack
        self.capacity = capacity


class InvalidConfigurationError(MultiStackError, ValueError):
    """Construction parameters or config file values are not positive integers."""
