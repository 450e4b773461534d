"""
Coin Matching

A coin-sorting machine is the classic example for `match`: the value runs
through each pattern in turn and the first one that fits decides the
result.

Two versions are kept side by side:

    - Coin: a plain Enum, every tag without payload
    - StateCoin: the same four tags, but quarters carry the UsState
      printed on their back (state quarters, 1999-2008)
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from enumatch.option import NOTHING, Option, Some
from enumatch.variants import Variant, sample, unreachable


class Coin(Enum):
    PENNY = "penny"
    NICKEL = "nickel"
    DIME = "dime"
    QUARTER = "quarter"

    @classmethod
    def default(cls) -> "Coin":
        """The most common coin in circulation."""
        return cls.PENNY


def value_in_cents(coin: Coin) -> int:
    match coin:
        case Coin.PENNY:
            print("Lucky penny!")
            return 1
        case Coin.NICKEL:
            return 5
        case Coin.DIME:
            return 10
        case Coin.QUARTER:
            return 25
        case _:
            unreachable(coin)


class UsState(Enum):
    """States that can appear on the back of a state quarter."""

    ALABAMA = "Alabama"
    ALASKA = "Alaska"
    ARIZONA = "Arizona"
    ARKANSAS = "Arkansas"
    CALIFORNIA = "California"
    COLORADO = "Colorado"
    CONNECTICUT = "Connecticut"
    DELAWARE = "Delaware"
    FLORIDA = "Florida"
    GEORGIA = "Georgia"
    HAWAII = "Hawaii"
    IDAHO = "Idaho"
    ILLINOIS = "Illinois"
    INDIANA = "Indiana"
    IOWA = "Iowa"
    KANSAS = "Kansas"
    KENTUCKY = "Kentucky"
    LOUISIANA = "Louisiana"
    MAINE = "Maine"
    MARYLAND = "Maryland"
    MASSACHUSETTS = "Massachusetts"
    MICHIGAN = "Michigan"
    MINNESOTA = "Minnesota"
    MISSISSIPPI = "Mississippi"
    MISSOURI = "Missouri"
    MONTANA = "Montana"
    NEBRASKA = "Nebraska"
    NEVADA = "Nevada"
    NEW_HAMPSHIRE = "New Hampshire"
    NEW_JERSEY = "New Jersey"
    NEW_MEXICO = "New Mexico"
    NEW_YORK = "New York"
    NORTH_CAROLINA = "North Carolina"
    NORTH_DAKOTA = "North Dakota"
    OHIO = "Ohio"
    OKLAHOMA = "Oklahoma"
    OREGON = "Oregon"
    PENNSYLVANIA = "Pennsylvania"
    RHODE_ISLAND = "Rhode Island"
    SOUTH_CAROLINA = "South Carolina"
    SOUTH_DAKOTA = "South Dakota"
    TENNESSEE = "Tennessee"
    TEXAS = "Texas"
    UTAH = "Utah"
    VERMONT = "Vermont"
    VIRGINIA = "Virginia"
    WASHINGTON = "Washington"
    WEST_VIRGINIA = "West Virginia"
    WISCONSIN = "Wisconsin"
    WYOMING = "Wyoming"

    @classmethod
    def default(cls) -> "UsState":
        return cls.ALABAMA


# =============================================================================
# State-bearing coins
# =============================================================================


class StateCoinBase(Variant):
    pass


@dataclass(frozen=True)
class Penny(StateCoinBase):
    pass


@dataclass(frozen=True)
class Nickel(StateCoinBase):
    pass


@dataclass(frozen=True)
class Dime(StateCoinBase):
    pass


@dataclass(frozen=True)
class Quarter(StateCoinBase):
    """A quarter with the state on its reverse. The payload is itself a closed type."""

    state: UsState


StateCoin = Union[Penny, Nickel, Dime, Quarter]


def state_value_in_cents(coin: StateCoin) -> int:
    """
    Value of a coin, announcing the state of any quarter.

    The Quarter branch binds the payload to `state`, which is only in
    scope inside that branch.
    """
    match coin:
        case Penny():
            return 1
        case Nickel():
            return 5
        case Dime():
            return 10
        case Quarter(state):
            print(f"State quarter from {state.value}!")
            return 25
        case _:
            unreachable(coin)


def quarter_state(coin: StateCoin) -> Option[UsState]:
    """The state on a quarter, or Nothing for every other coin."""
    match coin:
        case Quarter(state):
            return Some(state)
        case _:
            # Every non-quarter shares this branch.
            return NOTHING


def describe_coin(coin: StateCoin) -> str:
    """
    Describe a coin, dispatching a second time on a quarter's state.

    The nested match names a few states and lets a binding wildcard
    cover the rest.
    """
    match coin:
        case Penny():
            return "a penny"
        case Nickel():
            return "a nickel"
        case Dime():
            return "a dime"
        case Quarter(state):
            match state:
                case UsState.ALASKA:
                    return "a quarter from Alaska, the largest state"
                case UsState.RHODE_ISLAND:
                    return "a quarter from Rhode Island, the smallest state"
                case UsState.DELAWARE:
                    return "a quarter from Delaware, the first state"
                case other:
                    return f"a quarter from {other.value}"
        case _:
            unreachable(coin)


def count_non_quarters(coins: Iterable[StateCoin]) -> int:
    """
    Count every coin that is not a quarter, announcing each quarter seen.

    Only one tag is interesting here, so a single isinstance test with an
    else takes the place of a full match.
    """
    count = 0
    for coin in coins:
        if isinstance(coin, Quarter):
            print(f"State quarter from {coin.state.value}!")
        else:
            count += 1
    return count


def random_state_coin(rng: Optional[random.Random] = None) -> StateCoin:
    """Mint a random StateCoin; quarters get a random state."""
    kind = sample(StateCoin, rng)
    if kind is Quarter:
        return Quarter(sample(UsState, rng))
    return kind()
