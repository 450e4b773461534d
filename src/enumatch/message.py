"""
Message Variants

One closed type whose tags carry every payload shape:

    - Quit has no data associated with it at all
    - Move has named fields, like a struct does
    - Write includes a single string
    - ChangeColor includes three i32 values

Four separate classes could hold the same data, but then no single
function could take "any message". The Message alias is that single type.

Methods on the enumeration live on MessageBase, so every tag answers
`call()` and dispatches on itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union, cast

from enumatch.variants import Variant, check_int, unreachable


class MessageBase(Variant):
    """Behaviour shared by every Message tag."""

    def call(self) -> str:
        """Handle this message and report what was done."""
        return describe(cast(Message, self))


@dataclass(frozen=True)
class Quit(MessageBase):
    pass


@dataclass(frozen=True)
class Move(MessageBase):
    """Move to an absolute position. Both coordinates are i32."""

    x: int
    y: int

    def __post_init__(self) -> None:
        check_int(self.x, bits=32, signed=True, name="x")
        check_int(self.y, bits=32, signed=True, name="y")


@dataclass(frozen=True)
class Write(MessageBase):
    text: str


@dataclass(frozen=True)
class ChangeColor(MessageBase):
    """Change colour to (r, g, b). Each component is an unnamed i32."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            check_int(getattr(self, name), bits=32, signed=True, name=name)


Message = Union[Quit, Move, Write, ChangeColor]


def describe(msg: Message) -> str:
    match msg:
        case Quit():
            return "quit"
        case Move(x=x, y=y):
            return f"move to ({x}, {y})"
        case Write(text):
            return f"write {text!r}"
        case ChangeColor(r, g, b):
            return f"change color to rgb({r}, {g}, {b})"
        case _:
            unreachable(msg)
