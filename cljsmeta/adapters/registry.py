"""Per-run registry of foreign modules that the analyzer must treat as resolved."""

from __future__ import annotations

import itertools
from typing import Dict, Iterator, Optional

_PLACEHOLDER_PREFIX = "fake$module"


class ForeignModuleRegistry:
    """Maps foreign module names (npm packages and the like) to placeholder ids.

    One instance lives for exactly one ``read_namespaces`` call.
    """

    def __init__(self) -> None:
        self._placeholders: Dict[str, str] = {}
        self._counter = itertools.count(1)

    def register(self, module_name: str) -> str:
        """Return the placeholder for ``module_name``, creating it on first use."""
        existing = self._placeholders.get(module_name)
        if existing is not None:
            return existing
        placeholder = f"{_PLACEHOLDER_PREFIX}{next(self._counter)}"
        self._placeholders[module_name] = placeholder
        return placeholder

    def placeholder_for(self, module_name: str) -> Optional[str]:
        return self._placeholders.get(module_name)

    def __contains__(self, module_name: object) -> bool:
        return module_name in self._placeholders

    def __iter__(self) -> Iterator[str]:
        return iter(self._placeholders)

    def __len__(self) -> int:
        return len(self._placeholders)


__all__ = ["ForeignModuleRegistry"]
