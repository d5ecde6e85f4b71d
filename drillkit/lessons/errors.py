"""Worked answers to the error handling exercises."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_TEXT = re.compile(r"[+-]?[0-9]+")
_CREATION_DESCRIPTIONS = {"negative": "number is negative", "zero": "number is zero"}


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width, failing like a strict integer parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INT_TEXT.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; an empty name raises ValueError."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens for ``item_quantity`` items at five each plus a fee of one."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationError(ValueError):
    """A value that cannot be a positive non-zero integer; ``kind`` is "negative" or "zero"."""

    def __init__(self, kind: str) -> None:
        if kind not in _CREATION_DESCRIPTIONS:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(_CREATION_DESCRIPTIONS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.kind == self.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError("negative")
        if self.value == 0:
            raise CreationError("zero")


class ParsePosNonzeroError(ValueError):
    """Text that did not parse into a positive non-zero integer.

    ``cause`` is either a CreationError or the ValueError from parsing.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, err: CreationError) -> "ParsePosNonzeroError":
        return cls(err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> "ParsePosNonzeroError":
        return cls(err)

    @property
    def is_creation(self) -> bool:
        return isinstance(self.cause, CreationError)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse ``text`` into a PositiveNonzeroInteger; raise ParsePosNonzeroError otherwise."""
    try:
        number = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(number)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err