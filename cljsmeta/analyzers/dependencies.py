"""Collection of foreign (string-required) modules across a source tree."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Iterable, Set

from ..adapters.base import AnalysisAdapter
from ..logging import get_logger

logger = get_logger("dependencies")


def string_requires(requires: Iterable[object]) -> Set[str]:
    """Keep the requires given as plain strings (npm-style modules)."""
    return {require for require in requires if isinstance(require, str)}


def collect_foreign_modules(
    root: Path, files: Iterable[Path], adapter: AnalysisAdapter
) -> FrozenSet[str]:
    """Union the string requires of every file's ``ns`` form.

    For a package depending on React this returns ``frozenset({"react"})``.
    Header parse errors are not caught.
    """
    modules: Set[str] = set()
    for file in files:
        header = adapter.parse_ns(root / file)
        found = string_requires(header.requires)
        if found:
            logger.debug("%s requires foreign modules: %s", file, ", ".join(sorted(found)))
        modules |= found
    return frozenset(modules)


__all__ = ["collect_foreign_modules", "string_requires"]
