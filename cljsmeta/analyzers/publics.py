"""Classification and projection of public definitions into documentation records."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, List, Sequence

from ..models import AnalysisState, DefinitionRecord, RawDefinition, freeze
from .utils import correct_indent, normalize_to_source_path, remove_quote, unqualified_name

MACRO = "macro"
PROTOCOL = "protocol"
MULTIMETHOD = "multimethod"
VAR = "var"

MULTIFN_TAG = "cljs.core/MultiFn"


def is_multimethod(definition: RawDefinition) -> bool:
    tag = definition.get("tag")
    return tag is not None and str(tag) == MULTIFN_TAG


def var_type(definition: RawDefinition) -> str:
    """Classify a raw definition; the first matching flag wins."""
    if definition.get("macro"):
        return MACRO
    if definition.get("protocol_symbol"):
        return PROTOCOL
    if is_multimethod(definition):
        return MULTIMETHOD
    return VAR


def protocol_methods(
    protocol: RawDefinition, definitions: Iterable[RawDefinition]
) -> List[RawDefinition]:
    """Return the definitions that declare ``protocol`` as their protocol, in order."""
    protocol_name = unqualified_name(protocol["name"])
    return [
        definition
        for definition in definitions
        if definition.get("protocol") and unqualified_name(definition["protocol"]) == protocol_name
    ]


def read_definition(
    definition: RawDefinition,
    definitions: Sequence[RawDefinition],
    source_root: Path,
) -> DefinitionRecord:
    """Project ``definition`` into a :class:`DefinitionRecord`.

    ``definitions`` is every public of the file being read; protocols collect
    their methods from it as ``members`` without ``file``/``line``.
    """
    kind = var_type(definition)
    members = ()
    if kind == PROTOCOL:
        members = tuple(
            _without_location(read_definition(method, definitions, source_root))
            for method in protocol_methods(definition, definitions)
        )

    arglists = definition.get("arglists")
    doc = definition.get("doc")
    return DefinitionRecord(
        name=unqualified_name(definition["name"]),
        type=kind,
        file=normalize_to_source_path(source_root, definition.get("file")),
        line=definition.get("line"),
        arglists=freeze(remove_quote(arglists)) if arglists is not None else None,
        doc=correct_indent(doc) if doc is not None else None,
        dynamic=bool(definition.get("dynamic")),
        added=definition.get("added"),
        deprecated=freeze(definition.get("deprecated")),
        no_doc=bool(definition.get("no_doc")),
        skip_wiki=bool(definition.get("skip_wiki")),
        members=members,
    )


def _without_location(record: DefinitionRecord) -> DefinitionRecord:
    return replace(record, file=None, line=None)


def is_unreferenced_protocol_fn(
    source_root: Path, actual_file: Any, definition: RawDefinition
) -> bool:
    """True for a protocol method declared in the file being read.

    Such methods already appear as ``members`` of their protocol. A definition
    that points at a protocol but was declared elsewhere (a re-export made by
    tools like potemkin's ``import-vars``) is a public of its own.
    """
    if not definition.get("protocol"):
        return False
    declared_file = normalize_to_source_path(source_root, definition.get("file"))
    current_file = normalize_to_source_path(source_root, actual_file)
    return declared_file == current_file


def read_publics(
    state: AnalysisState, namespace: str, source_root: Path, file: Path
) -> List[DefinitionRecord]:
    """Return the documented publics of ``namespace`` as analyzed from ``file``."""
    definitions = state.ns_publics(namespace)
    return [
        read_definition(definition, definitions, source_root)
        for definition in definitions
        if not definition.get("anonymous")
        and not is_unreferenced_protocol_fn(source_root, file, definition)
    ]


__all__ = [
    "MACRO",
    "MULTIMETHOD",
    "PROTOCOL",
    "VAR",
    "is_multimethod",
    "is_unreferenced_protocol_fn",
    "protocol_methods",
    "read_definition",
    "read_publics",
    "var_type",
]
