"""Core data models shared across cljsmeta components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

RawDefinition = Mapping[str, Any]


@dataclass(frozen=True)
class Symbol:
    """A symbolic reference as reported by the analyzer (``ns/name`` or ``name``)."""

    namespace: Optional[str]
    name: str

    @classmethod
    def parse(cls, text: str) -> "Symbol":
        namespace, sep, name = text.partition("/")
        if sep and namespace and name:
            return cls(namespace=namespace, name=name)
        return cls(namespace=None, name=text)

    def __str__(self) -> str:
        if self.namespace:
            return f"{self.namespace}/{self.name}"
        return self.name


@dataclass
class NamespaceHeader:
    """The cheaply parsed ``ns`` form of a single source file."""

    name: str
    requires: List[Any] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class NamespaceAnalysis:
    """Analyzer view of one namespace: its docstring and public definitions."""

    name: str
    doc: Optional[str] = None
    publics: Dict[str, RawDefinition] = field(default_factory=dict)


@dataclass
class AnalysisState:
    """Full analysis result for one file, keyed by namespace name."""

    namespaces: Dict[str, NamespaceAnalysis] = field(default_factory=dict)

    def find_ns(self, name: str) -> Optional[NamespaceAnalysis]:
        return self.namespaces.get(name)

    def ns_publics(self, name: str) -> List[RawDefinition]:
        analysis = self.namespaces.get(name)
        if analysis is None:
            return []
        return list(analysis.publics.values())


@dataclass(frozen=True)
class DefinitionRecord:
    """Documentation metadata for a single public var, macro, protocol or multimethod."""

    name: str
    type: str
    file: Optional[str] = None
    line: Optional[int] = None
    arglists: Any = None
    doc: Optional[str] = None
    dynamic: bool = False
    added: Optional[str] = None
    deprecated: Any = None
    no_doc: bool = False
    skip_wiki: bool = False
    members: Tuple["DefinitionRecord", ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return remove_empties(
            {
                "name": self.name,
                "file": self.file,
                "line": self.line,
                "arglists": _thaw(self.arglists),
                "doc": self.doc,
                "type": self.type,
                "dynamic": self.dynamic,
                "added": self.added,
                "deprecated": _thaw(self.deprecated),
                "no_doc": self.no_doc,
                "skip_wiki": self.skip_wiki,
                "members": [member.to_dict() for member in self.members],
            }
        )


@dataclass(frozen=True)
class NamespaceRecord:
    """Documentation metadata for one namespace and its public definitions."""

    name: str
    doc: Optional[str] = None
    author: Any = None
    no_doc: bool = False
    skip_wiki: bool = False
    deprecated: Any = None
    added: Optional[str] = None
    publics: Tuple[DefinitionRecord, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data = remove_empties(
            {
                "name": self.name,
                "doc": self.doc,
                "author": _thaw(self.author),
                "no_doc": self.no_doc,
                "skip_wiki": self.skip_wiki,
                "deprecated": _thaw(self.deprecated),
                "added": self.added,
            }
        )
        data["publics"] = [public.to_dict() for public in self.publics]
        return data


@dataclass(frozen=True)
class FileOutcome:
    """Result of reading one file: either a namespace entry or the error raised."""

    file: Path
    entry: Optional[NamespaceRecord] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_empty(value: Any) -> bool:
    """Return True for values omitted from serialized records."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def remove_empties(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop every key whose value is absent, false or an empty string/collection."""
    return {key: value for key, value in data.items() if not is_empty(value)}


class FrozenMap(tuple):
    """Hashable stand-in for a mapping: a tuple of ``(key, value)`` pairs in insertion order."""

    def to_dict(self) -> Dict[Any, Any]:
        return {str(key) if isinstance(key, Symbol) else key: _thaw(value) for key, value in self}


def freeze(value: Any) -> Any:
    """Convert nested lists, dicts and sets into hashable values so records compare by value."""
    if isinstance(value, dict):
        return FrozenMap((key, freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)) and not isinstance(value, FrozenMap):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Symbol):
        return str(value)
    if isinstance(value, FrozenMap):
        return value.to_dict()
    if isinstance(value, (set, frozenset)):
        return sorted((_thaw(item) for item in value), key=str)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [_thaw(item) for item in value]
    return value
