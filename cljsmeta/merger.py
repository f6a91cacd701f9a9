"""Combination of per-file namespace entries into one record per namespace."""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Iterable, List, Mapping, Optional

from .models import NamespaceRecord

NamespaceEntry = Mapping[str, NamespaceRecord]


def merge_records(first: NamespaceRecord, following: NamespaceRecord) -> NamespaceRecord:
    """Keep ``first``'s metadata and union the publics of both records.

    Equal definitions collapse to one; first-seen order is kept.
    """
    publics = tuple(dict.fromkeys(first.publics + following.publics))
    return replace(first, publics=publics)


def merge_namespaces(entries: Iterable[Optional[NamespaceEntry]]) -> List[NamespaceRecord]:
    """Merge ``{name: record}`` entries (``None`` entries are skipped)."""
    merged: Dict[str, NamespaceRecord] = {}
    for entry in entries:
        if entry is None:
            continue
        if not isinstance(entry, Mapping):
            raise TypeError(f"Namespace entry must be a mapping, got {type(entry).__name__}")
        for name, record in entry.items():
            if not isinstance(record, NamespaceRecord):
                raise TypeError(
                    f"Namespace entry for {name!r} must be a NamespaceRecord, got {type(record).__name__}"
                )
            existing = merged.get(name)
            merged[name] = record if existing is None else merge_records(existing, record)
    return list(merged.values())


__all__ = ["NamespaceEntry", "merge_namespaces", "merge_records"]
