"""Worked answers to the recursive list and clone-on-write exercises."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Cons:
    """One cell of a cons list; a tail of None marks the end of the list."""

    value: int
    tail: Optional["Cons"] = None

    def __iter__(self) -> Iterator[int]:
        cell: Cons | None = self
        while cell is not None:
            yield cell.value
            cell = cell.tail


def create_empty_list() -> Cons | None:
    """The empty cons list."""
    return None


def create_non_empty_list() -> Cons:
    """A cons list holding a single element."""
    return Cons(1)


class Cow:
    """Data that is borrowed until it must be changed, then copied once."""

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self.data = data
        self.is_owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> "Cow":
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: MutableSequence[int]) -> "Cow":
        return cls(data, owned=True)

    def to_mut(self) -> MutableSequence[int]:
        """Mutable access to the data, copying it first if it is borrowed."""
        if not self.is_owned:
            self.data = list(self.data)
            self.is_owned = True
        return self.data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self.data)

    def __getitem__(self, index: int) -> int:
        return self.data[index]

    def __repr__(self) -> str:
        kind = "Owned" if self.is_owned else "Borrowed"
        return f"Cow.{kind}({list(self.data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying borrowed data only when needed."""
    for i, value in enumerate(tuple(cow.data)):
        if value < 0:
            cow.to_mut()[i] = -value
    return cow