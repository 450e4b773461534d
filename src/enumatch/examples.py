"""
Example values for the console demonstration.

Each builder returns the values one teaching step constructs, in the
order the demo prints them. Randomness comes from the `rng` argument so
tests can pass a seeded `random.Random`.
"""
import random
from typing import Dict, List, Optional, Tuple

from enumatch.coin import Coin, Quarter, StateCoin, UsState, random_state_coin
from enumatch.ip import IpAddrKind, IpV4, IpV4Octets, IpV6, IpV6Text, parse
from enumatch.message import ChangeColor, Message, Move, Quit, Write
from enumatch.option import NOTHING, Option, Some
from enumatch.variants import sample


def build_ip_examples() -> Dict[str, object]:
    return {
        "four": IpAddrKind.V4,
        "six": IpAddrKind.V6,
        "home": IpV4("127.0.0.1"),
        "loopback": IpV6("::1"),
        "home_octets": IpV4Octets(127, 0, 0, 1),
        "loopback_text": IpV6Text("::1"),
        "home_std": parse("127.0.0.1"),
        "loopback_std": parse("::1"),
    }


def build_message_examples() -> List[Message]:
    return [
        Quit(),
        Move(x=10, y=-3),
        Write("hello"),
        ChangeColor(0, 160, 255),
    ]


def build_option_examples() -> Tuple[Option[int], Option[str], Option[int]]:
    some_number: Option[int] = Some(5)
    some_char: Option[str] = Some("e")
    absent_number: Option[int] = NOTHING
    return some_number, some_char, absent_number


def build_coin_examples(
    count: int = 5,
    rng: Optional[random.Random] = None,
) -> Tuple[List[Coin], List[StateCoin]]:
    """
    Draw random coins of both kinds.

    The first state coin is always a Virginia quarter so every run shows
    a payload being destructured. Both lists hold exactly `count` coins.
    """
    rng = rng or random.Random()
    coins = [sample(Coin, rng) for _ in range(count)]
    state_coins: List[StateCoin] = []
    if count > 0:
        state_coins.append(Quarter(UsState.VIRGINIA))
        state_coins.extend(random_state_coin(rng) for _ in range(count - 1))
    return coins, state_coins
