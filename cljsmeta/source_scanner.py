"""Discovery of ClojureScript source files below a source root."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Set

SOURCE_SUFFIXES = (".cljs", ".cljc")


def canonical_path(path: str | os.PathLike[str]) -> Path:
    """Return the absolute, symlink-free form of ``path``."""
    return Path(path).expanduser().resolve()


def is_source_filename(filename: str) -> bool:
    return filename.endswith(SOURCE_SUFFIXES)


def _strip_parent(parent: Path) -> Callable[[Path], Optional[Path]]:
    prefix_length = len(str(parent)) + 1

    def _strip(child: Path) -> Optional[Path]:
        child_name = str(child)
        if len(child_name) < prefix_length:
            return None
        return Path(child_name[prefix_length:])

    return _strip


def _raise_walk_error(error: OSError) -> None:
    raise error


def _iter_files(root: Path) -> Iterator[Path]:
    visited: Set[Path] = set()
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error, followlinks=True):
        current_dir = Path(dirpath)
        # Symlinked directories are followed, but each real directory only once.
        real_dir = current_dir.resolve()
        if real_dir in visited:
            dirnames[:] = []
            continue
        visited.add(real_dir)
        dirnames.sort()
        for filename in sorted(filenames):
            if not is_source_filename(filename):
                continue
            candidate = current_dir / filename
            if candidate.is_file():
                yield candidate


def find_source_files(root: Path) -> List[Path]:
    """Return root-relative paths of every ``.cljs``/``.cljc`` file below ``root``.

    A ``root`` that is not a directory yields no files.
    """
    if not root.is_dir():
        return []
    strip = _strip_parent(root)
    files: List[Path] = []
    for candidate in _iter_files(root):
        relative = strip(candidate)
        if relative is not None:
            files.append(relative)
    return files


__all__ = ["SOURCE_SUFFIXES", "canonical_path", "find_source_files", "is_source_filename"]
