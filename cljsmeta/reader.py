"""Reading ClojureScript namespaces and their publics from a source directory."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .adapters import AdapterFactory, AnalysisAdapter, ForeignModuleRegistry, discover_adapter
from .analyzers.dependencies import collect_foreign_modules
from .analyzers.publics import read_publics
from .analyzers.utils import correct_indent
from .failsafe import ExceptionHandler, report_and_skip
from .logging import get_logger
from .merger import NamespaceEntry, merge_namespaces
from .models import FileOutcome, NamespaceRecord, freeze
from .source_scanner import canonical_path, find_source_files

logger = get_logger("reader")


@dataclass
class ReadOptions:
    """Knobs for :func:`read_namespaces`.

    ``adapter_factory`` is called once per run so every run gets its own
    adapter; when unset the installed adapter plugin is used.
    """

    exception_handler: ExceptionHandler = field(default=report_and_skip)
    adapter_factory: Optional[AdapterFactory] = None


def read_file(
    source_root: Path,
    file: Path,
    adapter: AnalysisAdapter,
    registry: ForeignModuleRegistry,
) -> FileOutcome:
    """Read the namespace declared in ``file``; failures are captured, not raised."""
    try:
        source = source_root / file
        header = adapter.parse_ns(source)
        state = adapter.analyze(source, registry)
        analysis = state.find_ns(header.name)
        doc = analysis.doc if analysis is not None else None
        meta = header.meta
        record = NamespaceRecord(
            name=header.name,
            doc=correct_indent(doc) if doc else None,
            author=freeze(meta.get("author")),
            no_doc=bool(meta.get("no_doc")),
            skip_wiki=bool(meta.get("skip_wiki")),
            deprecated=freeze(meta.get("deprecated")),
            added=meta.get("added"),
            publics=tuple(read_publics(state, header.name, source_root, file)),
        )
    except Exception as exc:
        return FileOutcome(file=file, error=exc)
    return FileOutcome(file=file, entry=record)


def resolve_outcome(
    outcome: FileOutcome, exception_handler: ExceptionHandler
) -> Optional[NamespaceEntry]:
    """Turn a file outcome into a merge entry, consulting the handler on failure."""
    error = outcome.error
    if error is None:
        record = outcome.entry
    else:
        record = exception_handler(error, outcome.file)
    if record is None:
        return None
    return {record.name: record}


def read_namespaces(
    path: str | os.PathLike[str], options: Optional[ReadOptions] = None
) -> List[NamespaceRecord]:
    """Read ClojureScript namespaces below ``path`` with their public definitions.

    Each returned :class:`NamespaceRecord` carries ``name``, ``doc``, ``author``,
    ``no_doc``, ``skip_wiki`` (legacy synonym for ``no_doc``), ``deprecated``,
    ``added`` and ``publics``. Each public has ``name``, ``file``, ``line``,
    ``arglists``, ``doc``, ``type`` (``var``, ``macro``, ``protocol`` or
    ``multimethod``), ``dynamic``, ``added``, ``deprecated``, ``no_doc``,
    ``skip_wiki`` and, for protocols, ``members``.

    Discovery and dependency scanning errors propagate. A file that fails to
    analyze is handed to ``options.exception_handler`` together with the error;
    whatever record it returns stands in for the file.
    """
    options = options or ReadOptions()
    source_root = canonical_path(path)
    if not source_root.exists():
        raise FileNotFoundError(f"Source path not found: {path}")

    factory = options.adapter_factory or discover_adapter()
    adapter = factory()
    registry = ForeignModuleRegistry()

    files = find_source_files(source_root)
    logger.info("Discovered %d source file(s) in %s", len(files), source_root)

    foreign_modules = collect_foreign_modules(source_root, files, adapter)
    for module_name in sorted(foreign_modules):
        adapter.register_placeholder(registry, module_name)
    if foreign_modules:
        logger.debug("Registered placeholders for %s", ", ".join(sorted(foreign_modules)))

    entries: List[Optional[NamespaceEntry]] = []
    failed = 0
    for file in files:
        logger.debug("Reading %s", file)
        outcome = read_file(source_root, file, adapter, registry)
        if not outcome.ok:
            failed += 1
        entries.append(resolve_outcome(outcome, options.exception_handler))

    namespaces = merge_namespaces(entries)
    logger.info(
        "Read %d namespace(s) from %d file(s) (%d failed)",
        len(namespaces),
        len(files),
        failed,
    )
    return namespaces


__all__ = ["ReadOptions", "read_file", "read_namespaces", "resolve_outcome"]
