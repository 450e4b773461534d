"""
Dispatch Coverage — runtime inventory of how a dispatch handles each tag.

A type checker proves exhaustiveness statically. This module gives the
same picture at runtime, for dispatches that were never type-checked or
for tests that want to enumerate every tag explicitly:

    - Handled tags (the dispatch returned a result)
    - Placeholder tags (the branch is still a `todo`)
    - Unhandled tags (the value fell through to `unreachable`)
    - Tags with no sample value supplied

IMPORTANT: This is read-only analysis. It calls the dispatch once per
sample and records what happened; it does not repair anything.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Set

from enumatch.variants import UnimplementedBranch, UnreachableVariant, tag_of, tags


@dataclass
class DispatchReport:
    """Per-tag outcome of running a dispatch over sample values."""

    closed_name: str
    total_tags: int = 0

    handled: Set[str] = field(default_factory=set)
    placeholders: Set[str] = field(default_factory=set)
    unhandled: Set[str] = field(default_factory=set)
    missing_samples: Set[str] = field(default_factory=set)

    results: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_exhaustive(self) -> bool:
        """True when every tag was sampled and none fell through."""
        return not (self.unhandled or self.missing_samples)

    def add_warning(self, msg: str) -> None:
        if msg not in self.warnings:
            self.warnings.append(msg)


def _tag_name(tag: Any) -> str:
    # Enum members name themselves; Variant classes carry a `tag` attribute.
    return getattr(tag, "tag", None) or tag_of(tag)


def analyze_dispatch(
    dispatch: Callable[[Any], Any],
    closed: Any,
    samples: Iterable[Any],
    warn: bool = False,
) -> DispatchReport:
    """
    Run `dispatch` over sample values and report coverage of `closed`.

    Args:
        dispatch: Function taking one value of the closed type
        closed: The Enum class or Union alias being dispatched on
        samples: At least one value per tag, ideally
        warn: Also emit each report warning through `warnings.warn`

    Returns:
        DispatchReport with handled / placeholder / unhandled tags

    Exceptions other than the placeholder and exhaustiveness errors
    propagate unchanged.
    """
    declared = [_tag_name(t) for t in tags(closed)]
    report = DispatchReport(
        closed_name=getattr(closed, "__name__", None) or repr(closed),
        total_tags=len(declared),
    )

    seen: Set[str] = set()
    for value in samples:
        name = tag_of(value)
        seen.add(name)
        try:
            report.results[name] = dispatch(value)
        except UnimplementedBranch:
            report.placeholders.add(name)
        except UnreachableVariant:
            report.unhandled.add(name)
        else:
            report.handled.add(name)

    report.missing_samples = set(declared) - seen

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    if report.unhandled:
        report.add_warning(f"Unhandled tags: {', '.join(sorted(report.unhandled))}")

    if report.placeholders:
        report.add_warning(f"Placeholder branches: {', '.join(sorted(report.placeholders))}")

    if report.missing_samples:
        report.add_warning(f"No sample for tags: {', '.join(sorted(report.missing_samples))}")

    if warn:
        for msg in report.warnings:
            warnings.warn(f"{report.closed_name}: {msg}", UserWarning)

    return report
