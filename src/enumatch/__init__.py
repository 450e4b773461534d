"""
enumatch — enumerations and pattern matching, by example.

Closed variant types with heterogeneous payloads, and exhaustive dispatch
over them with `match`.

PACKAGE LAYOUT:
---------------
    variants       core: Variant base, tag enumeration, exhaustiveness guard
    ip             IP address kinds and payload-carrying addresses
    message        one type, every payload shape, methods on the type
    option         Nothing | Some[T]
    coin           coin values, state quarters, nested dispatch
    dice           catch-all patterns
    coverage       runtime coverage report for a dispatch
    serialization  dict / YAML rendering of variant values
    examples       demonstration values

Type-check with mypy to get the exhaustiveness guarantee.
"""

__version__ = "0.1.0"
