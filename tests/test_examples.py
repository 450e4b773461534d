"""
Test the demonstration value builders and the demo script.
"""

import random
import runpy
from pathlib import Path

from enumatch.coin import Coin, Quarter, UsState
from enumatch.examples import (
    build_coin_examples,
    build_ip_examples,
    build_message_examples,
    build_option_examples,
)
from enumatch.ip import IpAddrKind, IpV4Octets
from enumatch.option import NOTHING, Some
from enumatch.variants import tag_of

DEMO = Path(__file__).resolve().parent.parent / "demo_enums.py"


def test_ip_examples():
    ips = build_ip_examples()
    assert ips["four"] is IpAddrKind.V4
    assert ips["home_octets"] == IpV4Octets(127, 0, 0, 1)
    assert tag_of(ips["loopback_std"]) == "V6"


def test_message_examples_cover_every_tag():
    assert [tag_of(m) for m in build_message_examples()] == ["Quit", "Move", "Write", "ChangeColor"]


def test_option_examples():
    assert build_option_examples() == (Some(5), Some("e"), NOTHING)


def test_coin_examples_seeded():
    coins, state_coins = build_coin_examples(count=6, rng=random.Random(11))
    again = build_coin_examples(count=6, rng=random.Random(11))
    assert (coins, state_coins) == again
    assert len(coins) == 6
    assert all(isinstance(c, Coin) for c in coins)
    assert state_coins[0] == Quarter(UsState.VIRGINIA)
    assert len(state_coins) == 6


def test_demo_runs(capsys):
    """The demo prints every section and completes normally."""
    namespace = runpy.run_path(str(DEMO))
    namespace["main"](seed=42)
    out = capsys.readouterr().out
    for title in ("IP ADDRESSES", "MESSAGES", "OPTION", "COINS", "DICE"):
        assert title in out
    assert "State quarter from Virginia!" in out
    assert "plus_one(Some(value=5)) = Some(value=6)" in out


def test_coin_examples_empty():
    """Asking for no coins yields no coins of either kind."""
    assert build_coin_examples(count=0, rng=random.Random(1)) == ([], [])
