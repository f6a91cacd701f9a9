"""Contract for the source analyzer that backs namespace reading."""

from abc import ABC, abstractmethod
from pathlib import Path

from ..models import AnalysisState, NamespaceHeader
from .registry import ForeignModuleRegistry


class AnalysisAdapter(ABC):
    """Bridges cljsmeta to an external ClojureScript analyzer.

    Implementations resolve symbols and build per-file symbol tables; cljsmeta
    only reshapes what they return.
    """

    @abstractmethod
    def parse_ns(self, path: Path) -> NamespaceHeader:
        """Parse only the ``ns`` form of ``path``.

        Requires given as plain strings must be returned as ``str``; in-tree
        namespaces must be returned as :class:`~cljsmeta.models.Symbol`.
        """

    @abstractmethod
    def analyze(self, path: Path, registry: ForeignModuleRegistry) -> AnalysisState:
        """Run a full analysis of ``path``.

        Every module registered in ``registry`` must resolve without its source.
        """

    def register_placeholder(self, registry: ForeignModuleRegistry, module_name: str) -> None:
        """Make ``module_name`` resolvable for all later analyses of this run."""
        registry.register(module_name)
