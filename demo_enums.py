#!/usr/bin/env python3
"""
Demo: Build each teaching example and print the values and dispatch results.

Pass a seed on the command line for reproducible coins and dice.
"""

import random
import sys

from enumatch.coin import (
    count_non_quarters,
    describe_coin,
    quarter_state,
    state_value_in_cents,
    value_in_cents,
)
from enumatch.coverage import analyze_dispatch
from enumatch.dice import on_roll, on_roll_noop, on_roll_reroll, roll_dice
from enumatch.examples import (
    build_coin_examples,
    build_ip_examples,
    build_message_examples,
    build_option_examples,
)
from enumatch.ip import describe, kind_of, route
from enumatch.message import Message
from enumatch.option import plus_one
from enumatch.serialization import variant_to_yaml


def section(title):
    print()
    print("=" * 70)
    print(title)
    print("=" * 70)


def main(seed=None):
    rng = random.Random(seed)

    section("IP ADDRESSES")
    ips = build_ip_examples()
    route(ips["four"])
    route(ips["six"])
    for name in ("home", "loopback", "home_octets", "loopback_text", "home_std", "loopback_std"):
        value = ips[name]
        print(f"`{name}` ({kind_of(value).name}) is:")
        print(variant_to_yaml(value))
    print(describe(ips["home_octets"]))
    print(describe(ips["loopback_text"]))

    section("MESSAGES")
    messages = build_message_examples()
    for msg in messages:
        print(msg.call())
    report = analyze_dispatch(lambda m: m.call(), Message, messages)
    print(f"Message dispatch covers {len(report.handled)}/{report.total_tags} tags")

    section("OPTION")
    five, some_char, absent = build_option_examples()
    print(f"some_number = {five}, some_char = {some_char}, absent_number = {absent}")
    print(f"plus_one({five}) = {plus_one(five)}")
    print(f"plus_one({absent}) = {plus_one(absent)}")

    section("COINS")
    coins, state_coins = build_coin_examples(rng=rng)
    for coin in coins:
        print(f"{coin.name}: {value_in_cents(coin)} cents")
    for coin in state_coins:
        print(f"{describe_coin(coin)}: {state_value_in_cents(coin)} cents, state {quarter_state(coin)}")
    print(f"non-quarters: {count_non_quarters(state_coins)}")

    section("DICE")
    for _ in range(3):
        roll = roll_dice(rng)
        print(f"rolled {roll}: {on_roll(roll)} / {on_roll_reroll(roll)} / {on_roll_noop(roll)}")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else None)
