"""Normalization helpers for raw analyzer output."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Optional

from ..models import Symbol

QUOTE = "quote"
_FILE_URL_PREFIX = "file:"


def unqualified_name(value: Any) -> str:
    """Return the name part of ``ns/name`` symbols and strings.

    ``cljs.core//`` yields ``/``.
    """
    if isinstance(value, Symbol):
        return value.name
    text = str(value)
    namespace, sep, name = text.partition("/")
    if sep and namespace and name:
        return name
    return text


def _is_quote_marker(value: Any) -> bool:
    if isinstance(value, Symbol):
        return value.namespace is None and value.name == QUOTE
    return value == QUOTE


def remove_quote(form: Any) -> Any:
    """Unwrap a ``(quote x)`` form to ``x``; other values pass through."""
    if (
        isinstance(form, (list, tuple))
        and len(form) == 2
        and _is_quote_marker(form[0])
    ):
        return form[1]
    return form


def correct_indent(text: Optional[str]) -> Optional[str]:
    """Strip the leading whitespace shared by every non-blank line of a docstring.

    Only the common prefix goes, so relative indentation survives and a second
    pass changes nothing.
    """
    if text is None:
        return None
    return textwrap.dedent(text)


def normalize_to_source_path(source_root: Path, file: Any) -> Optional[str]:
    """Return ``file`` relative to ``source_root`` however the analyzer reported it."""
    if file is None:
        return None
    text = str(file)
    if text.startswith(_FILE_URL_PREFIX):
        text = text[len(_FILE_URL_PREFIX):]
        if text.startswith("//"):
            text = text[2:]
    candidate = Path(text)
    if candidate.is_absolute():
        try:
            return candidate.relative_to(source_root).as_posix()
        except ValueError:
            resolved = candidate.resolve()
            try:
                return resolved.relative_to(source_root).as_posix()
            except ValueError:
                return candidate.as_posix()
    return candidate.as_posix()


__all__ = [
    "QUOTE",
    "correct_indent",
    "normalize_to_source_path",
    "remove_quote",
    "unqualified_name",
]
