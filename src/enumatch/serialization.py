"""
Dict / YAML rendering of variant values.

Used for human-readable output of constructed values (the demo prints
them this way). The tag always comes first under the key "tag"; payload
fields follow under their field names. Nested variants and enum members
render recursively.

Generic payloads (the value inside Some[T]) carry no type information of
their own, so rebuilding a tagged value there needs the closed set it
belongs to, passed as `payload`.
"""
from __future__ import annotations

import dataclasses
import ipaddress
from enum import Enum
from typing import Any, Dict, Optional, TypeVar, get_args, get_type_hints

import yaml

from enumatch.variants import Variant, tag_of, tags


def _value_to_plain(value: Any) -> Any:
    if isinstance(value, (Variant, Enum)):
        return variant_to_dict(value)
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return str(value)
    return value


def variant_to_dict(value: Variant | Enum) -> Dict[str, Any]:
    d: Dict[str, Any] = {"tag": tag_of(value)}
    if isinstance(value, Variant) and dataclasses.is_dataclass(value):
        for f in dataclasses.fields(value):
            d[f.name] = _value_to_plain(getattr(value, f.name))
    return d


def _is_tagged(raw: Any) -> bool:
    return isinstance(raw, dict) and "tag" in raw


def _value_from_plain(raw: Any, hint: Any, payload: Any) -> Any:
    if isinstance(hint, type) and issubclass(hint, Enum):
        return variant_from_dict(raw, hint, payload)
    if isinstance(hint, type) and issubclass(hint, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return hint(raw)
    if isinstance(hint, TypeVar) or hint is Any:
        if not _is_tagged(raw):
            return raw
        if payload is None:
            raise ValueError(
                f"Generic payload {raw!r} needs its closed set; pass payload=..."
            )
        return variant_from_dict(raw, payload, payload)
    if _is_tagged(raw) and get_args(hint):
        return variant_from_dict(raw, hint, payload)
    return raw


def variant_from_dict(d: Any, closed: Any, payload: Optional[Any] = None) -> Any:
    """
    Rebuild a value of the closed type `closed` from its dict form.

    Args:
        d: Dict produced by variant_to_dict
        closed: The Enum class or Union alias the value belongs to
        payload: Closed set of any tagged value stored in a generic field,
                 e.g. StateCoin for Some(Quarter(...)) or Option for
                 Some(NOTHING)

    Raises:
        ValueError: If d is not a tagged dict, the tag is not a member of
                    `closed`, a payload field is missing, or a tagged
                    generic payload arrives without `payload`
    """
    if not _is_tagged(d):
        raise ValueError(f"Expected a dict with a 'tag' key, got {d!r}")
    name = d["tag"]
    for tag in tags(closed):
        if isinstance(tag, Enum):
            if tag.name == name:
                return tag
        elif tag.tag == name:
            fields = dataclasses.fields(tag)
            missing = [f.name for f in fields if f.name not in d]
            if missing:
                raise ValueError(f"Tag {name!r} is missing payload fields: {', '.join(missing)}")
            hints = get_type_hints(tag)
            kwargs = {
                f.name: _value_from_plain(d[f.name], hints.get(f.name), payload)
                for f in fields
            }
            return tag(**kwargs)
    raise ValueError(f"Unknown tag {name!r} for {closed!r}")


def variant_to_yaml(value: Variant | Enum) -> str:
    return yaml.safe_dump(variant_to_dict(value), sort_keys=False)


def variant_from_yaml(s: str, closed: Any, payload: Optional[Any] = None) -> Any:
    d = yaml.safe_load(s)
    return variant_from_dict(d, closed, payload)
