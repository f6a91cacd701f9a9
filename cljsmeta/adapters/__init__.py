"""Analysis adapter contract and plugin discovery."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Iterable, List

from .base import AnalysisAdapter
from .registry import ForeignModuleRegistry

_ENTRY_POINT_GROUP = "cljsmeta.adapters"

AdapterFactory = Callable[[], AnalysisAdapter]


def discover_adapter(name: str | None = None) -> AdapterFactory:
    """Return a factory for the installed adapter plugin called ``name``.

    Without a name the single installed plugin is used.
    """
    entries = list(_iter_entry_points())
    if name is not None:
        matches = [entry for entry in entries if entry.name.lower() == name.lower()]
        if not matches:
            raise ValueError(f"Unknown analysis adapter requested: {name}")
        entry = matches[0]
    elif len(entries) == 1:
        entry = entries[0]
    elif not entries:
        raise ValueError(
            f"No analysis adapter installed; register one under the '{_ENTRY_POINT_GROUP}' entry point group"
        )
    else:
        available = ", ".join(sorted(entry.name for entry in entries))
        raise ValueError(f"Several analysis adapters installed ({available}); choose one by name")

    try:
        loaded = entry.load()
    except Exception as exc:
        raise RuntimeError(f"Failed to load analysis adapter entry point '{entry.name}': {exc}") from exc

    def _factory(obj: object = loaded) -> AnalysisAdapter:
        return _coerce_adapter(obj)

    return _factory


def available_adapters() -> List[str]:
    return sorted(entry.name for entry in _iter_entry_points())


def _coerce_adapter(obj: object) -> AnalysisAdapter:
    if isinstance(obj, type) and issubclass(obj, AnalysisAdapter):
        return obj()
    if callable(obj) and not isinstance(obj, AnalysisAdapter):
        instance = obj()
        if isinstance(instance, AnalysisAdapter):
            return instance
    raise TypeError("Analysis adapter entry point must be an AnalysisAdapter subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    entry_points = metadata.entry_points()
    if hasattr(entry_points, "select"):
        return entry_points.select(group=_ENTRY_POINT_GROUP)  # type: ignore[return-value]
    return entry_points.get(_ENTRY_POINT_GROUP, [])  # type: ignore[return-value]


__all__ = [
    "AdapterFactory",
    "AnalysisAdapter",
    "ForeignModuleRegistry",
    "available_adapters",
    "discover_adapter",
]
