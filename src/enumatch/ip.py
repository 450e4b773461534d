"""
IP Address Variants

Three ways to model "an IP address is either version four or version six":

    - IpAddrKind: the kind alone, an Enum with no payload
    - IpAddr: each kind carries its address as a string
    - IpAddrTypes: each kind carries a differently shaped payload
      (four u8 octets for V4, a string for V6)
    - IpAddrStd: each kind wraps a dedicated address object, the way a
      standard library would (here: the `ipaddress` module)

Both V4 and V6 are still IP addresses, so code that works for any address
takes the closed type and dispatches on the tag.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Union

from enumatch.variants import Variant, check_int, unreachable


class IpAddrKind(Enum):
    """The two kinds of IP address. Tags only, no payload."""

    V4 = "v4"
    V6 = "v6"


def route(ip_kind: IpAddrKind) -> None:
    """Accept any kind of IP address. Routing itself is out of scope."""


# =============================================================================
# Single string payload
# =============================================================================


class IpAddrBase(Variant):
    """Shared base of the IpAddr shapes."""
    pass


@dataclass(frozen=True)
class IpV4(IpAddrBase, tag="V4"):
    address: str


@dataclass(frozen=True)
class IpV6(IpAddrBase, tag="V6"):
    address: str


IpAddr = Union[IpV4, IpV6]


# =============================================================================
# Different payload types per tag
# =============================================================================


class IpAddrTypesBase(Variant):
    """Shared base of the IpAddrTypes shapes."""
    pass


@dataclass(frozen=True)
class IpV4Octets(IpAddrTypesBase, tag="V4"):
    """
    A version four address as four unnamed u8 components.

    Example:
        IpV4Octets(127, 0, 0, 1)

    Each component must fit in 0..255.
    """

    a: int
    b: int
    c: int
    d: int

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d"):
            check_int(getattr(self, name), bits=8, signed=False, name=name)


@dataclass(frozen=True)
class IpV6Text(IpAddrTypesBase, tag="V6"):
    address: str


IpAddrTypes = Union[IpV4Octets, IpV6Text]


# =============================================================================
# Standard library address objects as payload
# =============================================================================


class IpAddrStdBase(Variant):
    pass


@dataclass(frozen=True)
class StdV4(IpAddrStdBase, tag="V4"):
    address: ipaddress.IPv4Address


@dataclass(frozen=True)
class StdV6(IpAddrStdBase, tag="V6"):
    address: ipaddress.IPv6Address


IpAddrStd = Union[StdV4, StdV6]


# =============================================================================
# Dispatch
# =============================================================================


def kind_of(addr: IpAddr | IpAddrTypes | IpAddrStd) -> IpAddrKind:
    """Map any of the payload-carrying address shapes back to its kind."""
    match addr:
        case IpV4() | IpV4Octets() | StdV4():
            return IpAddrKind.V4
        case IpV6() | IpV6Text() | StdV6():
            return IpAddrKind.V6
        case _:
            unreachable(addr)


def describe(addr: IpAddrTypes) -> str:
    """Render an IpAddrTypes value, destructuring each payload shape."""
    match addr:
        case IpV4Octets(a, b, c, d):
            return f"V4 {a}.{b}.{c}.{d}"
        case IpV6Text(address):
            return f"V6 {address}"
        case _:
            unreachable(addr)


def loopback(kind: IpAddrKind) -> IpAddrTypes:
    """Build the loopback address for a kind."""
    match kind:
        case IpAddrKind.V4:
            return IpV4Octets(127, 0, 0, 1)
        case IpAddrKind.V6:
            return IpV6Text("::1")
        case _:
            unreachable(kind)


def parse(text: str) -> IpAddrStd:
    """
    Parse an address string into the matching IpAddrStd shape.

    Raises:
        ValueError: If text is not a valid IPv4 or IPv6 address
    """
    address = ipaddress.ip_address(text)
    if isinstance(address, ipaddress.IPv4Address):
        return StdV4(address)
    return StdV6(address)


def to_text(addr: IpAddrStd) -> IpAddr:
    """Convert a structured address to the string-payload shape."""
    match addr:
        case StdV4(address):
            return IpV4(str(address))
        case StdV6(address):
            return IpV6(address.compressed)
        case _:
            unreachable(addr)
