"""Worked answers to the iterator exercises."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Mapping

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1
_U64_MAX = (1 << 64) - 1


def capitalize_first(text: str) -> str:
    """Uppercase the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalize each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalize each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division that does not give a whole result."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``a`` is evenly divisible by ``b``."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    result = a // b
    if not _I32_MIN <= result <= _I32_MAX:
        raise OverflowError("quotient does not fit in a 32-bit integer")
    return result


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """All quotients by 27, raising the first DivisionError met."""
    return [divide(n, 27) for n in _NUMBERS]


def _attempt(n: int, divisor: int) -> int | DivisionError:
    try:
        return divide(n, divisor)
    except DivisionError as err:
        return err


def list_of_results() -> list[int | DivisionError]:
    """Each quotient by 27, or the DivisionError for that number."""
    return [_attempt(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """``num!`` for a non-negative ``num`` whose factorial fits in 64 bits."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial does not fit in 64 bits")
    return result


class Progress(enum.Enum):
    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with ``value`` using a plain loop."""
    count = 0
    for val in progress_map.values():
        if val == value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with ``value`` using a generator."""
    return sum(1 for val in progress_map.values() if val == value)


def count_collection_for(collection: Iterable[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with ``value`` across maps using plain loops."""
    count = 0
    for progress_map in collection:
        for val in progress_map.values():
            if val == value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with ``value`` across maps using generators."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)