"""
Catch-all Patterns

A dice game where a roll of 3 earns a fancy hat, a roll of 7 loses it,
and anything else moves the player. An int has far too many values to
list, so the last arm of each match is a catch-all.

Three flavours of catch-all:

    - a binding name (`other`), when the branch needs the value
    - `_`, when it does not
    - `_` with an empty branch, when nothing should happen at all

A catch-all gives up exhaustiveness for whatever it covers, so it always
comes last; the named arms above it win.
"""

from __future__ import annotations

import random
from typing import Optional


def on_roll(roll: int) -> str:
    match roll:
        case 3:
            return "add fancy hat"
        case 7:
            return "remove fancy hat"
        case other:
            return f"move player {other} spaces"


def on_roll_reroll(roll: int) -> str:
    match roll:
        case 3:
            return "add fancy hat"
        case 7:
            return "remove fancy hat"
        case _:
            return "reroll"


def on_roll_noop(roll: int) -> Optional[str]:
    """Any roll other than 3 or 7 does nothing."""
    match roll:
        case 3:
            return "add fancy hat"
        case 7:
            return "remove fancy hat"
        case _:
            pass
    return None


def roll_dice(rng: Optional[random.Random] = None, sides: int = 6, count: int = 2) -> int:
    """Sum of `count` rolls of a die with `sides` faces."""
    chooser = rng if rng is not None else random
    return sum(chooser.randint(1, sides) for _ in range(count))
