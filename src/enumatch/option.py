"""
Optional Values

The two-tag closed type for "a value that may be absent":

    Option[T] = Nothing | Some[T]

Unlike a bare `None`, an Option cannot be used as a T by accident. The
value has to be taken out by a dispatch that also says what happens when
it is absent, and a type checker rejects a dispatch that forgets to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar, Union

from enumatch.variants import Variant, unreachable

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Nothing(Variant):
    """The absent tag. Carries no payload."""
    pass


@dataclass(frozen=True)
class Some(Variant, Generic[T]):
    """The present tag. Carries exactly one value."""

    value: T


Option = Union[Nothing, Some[T]]

NOTHING = Nothing()


def map_option(opt: Option[T], f: Callable[[T], U]) -> Option[U]:
    """
    Apply f to a present value and rewrap the result.

    Nothing is returned unchanged; f is never called for it.
    """
    match opt:
        case Nothing():
            return NOTHING
        case Some(value):
            return Some(f(value))
        case _:
            unreachable(opt)


def plus_one(x: Option[int]) -> Option[int]:
    match x:
        case Nothing():
            return NOTHING
        case Some(i):
            return Some(i + 1)
        case _:
            unreachable(x)


def unwrap_or(opt: Option[T], default: T) -> T:
    """Return the present value, or default when absent."""
    match opt:
        case Some(value):
            return value
        case Nothing():
            return default
        case _:
            unreachable(opt)


def from_optional(value: Optional[T]) -> Option[T]:
    """Lift a plain `None`-or-value into an Option."""
    if value is None:
        return NOTHING
    return Some(value)


def to_optional(opt: Option[T]) -> Optional[T]:
    match opt:
        case Some(value):
            return value
        case Nothing():
            return None
        case _:
            unreachable(opt)
