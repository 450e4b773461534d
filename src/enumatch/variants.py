"""
Closed Variant Types

The core building blocks shared by every example in this package.

A closed variant type (sum type, tagged union) is a value that is exactly
one of a fixed set of shapes. Python gives us two ways to spell one:

    - An Enum, when no tag carries data:

        class Coin(Enum):
            PENNY = 1
            ...

    - A Union alias of frozen dataclasses deriving from Variant, when tags
      carry payloads:

        @dataclass(frozen=True)
        class Quit(MessageBase):
            pass

        @dataclass(frozen=True)
        class Write(MessageBase):
            text: str

        Message = Union[Quit, Write]

Dispatch over either form is a `match` statement that ends with

        case _:
            unreachable(value)

`unreachable` accepts only `NoReturn`, so a type checker rejects any
dispatch where some tag can still reach the final branch. That is the
exhaustiveness guarantee.

ARCHITECTURAL RULE:
    Variants are immutable (frozen=True).
    They hold payload only; behaviour lives in dispatch functions.
"""

from __future__ import annotations

import random
import types
from abc import ABC
from enum import Enum
from typing import Any, ClassVar, NoReturn, Optional, Tuple, Union, get_args, get_origin


class VariantError(Exception):
    """Base class for errors raised by variant values."""
    pass


class PayloadError(VariantError, ValueError):
    """Raised when a payload does not fit the shape its tag declares."""
    pass


class UnreachableVariant(VariantError, TypeError):
    """Raised when a value reaches the exhaustiveness guard of a dispatch."""
    pass


class UnimplementedBranch(VariantError, NotImplementedError):
    """Raised by a placeholder branch that has not been written yet."""
    pass


class Variant(ABC):
    """
    Base class for the payload-carrying shapes of a closed variant type.

    Each concrete shape is a frozen dataclass. The tag defaults to the
    class name and can be overridden with a class keyword when two closed
    sets reuse the same short name:

        @dataclass(frozen=True)
        class IpV4(IpAddrBase, tag="V4"):
            address: str

    The closed set itself is the Union alias, not this class. Subclassing
    Variant is open-ended; the Union is what a type checker enumerates.
    """

    tag: ClassVar[str]

    def __init_subclass__(cls, tag: Optional[str] = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.tag = tag or cls.__name__


def tag_of(value: Union[Variant, Enum]) -> str:
    """Return the tag name of an enum member or a Variant instance."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, Variant):
        return value.tag
    raise TypeError(f"Not a variant value: {value!r}")


def tags(closed: Any) -> Tuple[Any, ...]:
    """
    Enumerate every tag of a closed set in declaration order.

    Args:
        closed: An Enum class, or a Union alias of Variant classes
                (parameterized aliases such as Option[int] are accepted)

    Returns:
        Enum members, or the Variant classes with any generic
        parameters stripped

    A fresh tuple is built on each call, so enumeration is restartable.
    """
    if isinstance(closed, type) and issubclass(closed, Enum):
        return tuple(closed)
    members = get_args(closed)
    if get_origin(closed) not in (Union, types.UnionType) or not members:
        if isinstance(closed, type) and issubclass(closed, Variant):
            return (closed,)
        raise TypeError(f"Not a closed variant set: {closed!r}")
    return tuple(get_origin(member) or member for member in members)


def sample(closed: Any, rng: Optional[random.Random] = None) -> Any:
    """Pick one tag of a closed set uniformly at random."""
    chooser = rng if rng is not None else random
    return chooser.choice(tags(closed))


def unreachable(value: NoReturn) -> NoReturn:
    """
    Exhaustiveness guard for the final branch of a dispatch.

    Type checkers only accept a call here when every tag has already been
    matched above it. At runtime it fires only for values that were never
    members of the closed set.
    """
    raise UnreachableVariant(f"Unhandled variant: {value!r}")


def todo(message: str = "not yet implemented") -> NoReturn:
    """Placeholder for a branch that still has to be written."""
    raise UnimplementedBranch(message)


def check_int(value: int, bits: int, signed: bool, name: str) -> int:
    """
    Validate a fixed-width integer payload.

    Args:
        value: The payload value
        bits: Width of the integer (8 for u8, 32 for i32)
        signed: Whether negative values are allowed
        name: Field name, used in the error message

    Returns:
        The value unchanged

    Raises:
        PayloadError: If value is not an int or falls outside the range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"{name} must be an integer, got {type(value).__name__}")
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    if not low <= value <= high:
        raise PayloadError(f"{name}={value} is outside [{low}, {high}]")
    return value
