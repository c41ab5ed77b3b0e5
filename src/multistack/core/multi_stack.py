"""Several LIFO stacks multiplexed over one fixed-length buffer.

Slots are interleaved round-robin: with n stacks, stack s (1-based) owns
buffer positions s-1, s-1+n, s-1+2n, ... that fall below the capacity.
Within a stack's slots the occupied ones always form a contiguous prefix,
so the top of a stack is the last occupied slot before the first empty one.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from multistack.core.errors import (
    InvalidConfigurationError,
    StackIndexOutOfBoundsError,
    StackOutOfCapacityError,
)

logger = logging.getLogger(__name__)

V = TypeVar("V")

DEFAULT_NUMBER_OF_STACKS = 1
DEFAULT_CAPACITY = 10


class _EmptySlot:
    """Marker for an unoccupied slot, so that None stays a storable value."""

    def __repr__(self) -> str:
        return "<empty>"


_EMPTY = _EmptySlot()


def validate_positive_int(name: str, value: object) -> int:
    """Return value if it is an int >= 1, otherwise raise InvalidConfigurationError."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidConfigurationError(f"{name} must be at least 1, got {value}")
    return value


class MultiStack(Generic[V]):
    """Fixed-capacity container holding several independent stacks in one buffer.

    The buffer never grows. Each stack can hold at most
    ceil((capacity - (stack - 1)) / number_of_stacks) values, and inserting
    past that raises StackOutOfCapacityError even when other stacks have room.

    Not safe for concurrent use: wrap the whole structure in one lock if it
    is shared between threads.
    """

    def __init__(
        self,
        number_of_stacks: int = DEFAULT_NUMBER_OF_STACKS,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        self._number_of_stacks = validate_positive_int("number_of_stacks", number_of_stacks)
        self._capacity = validate_positive_int("capacity", capacity)
        self._slots: list[V | _EmptySlot] = [_EMPTY] * self._capacity

    @property
    def number_of_stacks(self) -> int:
        return self._number_of_stacks

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def storage(self) -> tuple[V | None, ...]:
        """Snapshot of the buffer, with empty slots shown as None."""
        return tuple(None if slot is _EMPTY else slot for slot in self._slots)  # type: ignore[misc]

    def insert(self, value: V, stack: int) -> None:
        """Push value onto the given stack.

        Complexity: O(capacity / number_of_stacks).

        Args:
            value: Value to store
            stack: 1-based stack index

        Raises:
            StackIndexOutOfBoundsError: If stack is outside [1, number_of_stacks]
            StackOutOfCapacityError: If every slot of the stack is occupied
        """
        self._validate_stack_index(stack)
        index, _ = self._find_boundary(stack)
        if index >= self._capacity:
            logger.debug("Stack %d is full (capacity %d)", stack, self._capacity)
            raise StackOutOfCapacityError(stack, self._capacity)
        self._slots[index] = value
        logger.debug("Inserted into stack %d at slot %d", stack, index)

    def pop(self, stack: int) -> V | None:
        """Remove and return the top value of the given stack.

        Returns:
            The top value, or None if the stack is empty

        Raises:
            StackIndexOutOfBoundsError: If stack is outside [1, number_of_stacks]
        """
        self._validate_stack_index(stack)
        _, top = self._find_boundary(stack)
        if top is None:
            logger.debug("Pop from empty stack %d", stack)
            return None
        value = self._slots[top]
        self._slots[top] = _EMPTY
        logger.debug("Popped stack %d from slot %d", stack, top)
        return value  # type: ignore[return-value]

    def peek(self, stack: int) -> V | None:
        """Return the top value of the given stack without removing it.

        Returns:
            The top value, or None if the stack is empty

        Raises:
            StackIndexOutOfBoundsError: If stack is outside [1, number_of_stacks]
        """
        self._validate_stack_index(stack)
        _, top = self._find_boundary(stack)
        if top is None:
            return None
        return self._slots[top]  # type: ignore[return-value]

    def _find_boundary(self, stack: int) -> tuple[int, int | None]:
        """Walk the stack's slots up to its first empty one.

        Returns:
            (first empty slot index, or a value >= capacity when the stack is full;
             index of the top occupied slot, or None when the stack is empty)
        """
        index = stack - 1
        top: int | None = None
        while index < self._capacity and self._slots[index] is not _EMPTY:
            top = index
            index += self._number_of_stacks
        return index, top

    def _validate_stack_index(self, stack: int) -> None:
        if isinstance(stack, bool) or not isinstance(stack, int):
            raise StackIndexOutOfBoundsError(stack, self._number_of_stacks)
        if stack < 1 or stack > self._number_of_stacks:
            raise StackIndexOutOfBoundsError(stack, self._number_of_stacks)

    def __repr__(self) -> str:
        return (
            f"MultiStack(number_of_stacks={self._number_of_stacks}, capacity={self._capacity})"
        )
