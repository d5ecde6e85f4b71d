"""Worked answers to the generics, traits and test-writing exercises."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T


@singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software versioned by a number."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software versioned by a string."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """True when both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")