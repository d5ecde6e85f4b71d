"""Worked answer to the message-processing enum exercise."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the grid."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to the given red, green and blue values."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Echo:
    """Replace the stored message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a new position."""

    position: Point


@dataclass(frozen=True)
class Quit:
    """Mark the state as quit."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Mutable state that messages act upon."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                self.message = text
            case Move(position=position):
                self.position = position
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")