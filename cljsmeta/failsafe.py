"""Exception handlers applied when a single file cannot be read."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

from .logging import get_logger, log_exception
from .models import NamespaceRecord

ExceptionHandler = Callable[[BaseException, Path], Optional[NamespaceRecord]]

logger = get_logger("failsafe")


class NamespaceReadError(RuntimeError):
    """Raised by fail-fast runs when a file cannot be analyzed."""

    def __init__(self, file: Path, cause: BaseException) -> None:
        super().__init__(f"Could not read namespace from {file}: {cause}")
        self.file = file
        self.cause = cause


def report_and_skip(error: BaseException, file: Path) -> Optional[NamespaceRecord]:
    """Log the failure and contribute nothing for ``file``."""
    log_exception(
        logger,
        f"Could not generate ClojureScript documentation for {file} - root cause",
        _root_cause(error),
    )
    return None


def raise_error(error: BaseException, file: Path) -> Optional[NamespaceRecord]:
    raise NamespaceReadError(file, error) from error


def placeholder_namespace(record: NamespaceRecord) -> ExceptionHandler:
    """Return a handler that substitutes ``record`` for every failed file."""

    def _handler(error: BaseException, file: Path) -> Optional[NamespaceRecord]:
        log_exception(logger, f"Substituting namespace {record.name} for {file}", error)
        return record

    return _handler


def _root_cause(error: BaseException) -> BaseException:
    cause = error
    seen = {id(cause)}
    while cause.__cause__ is not None and id(cause.__cause__) not in seen:
        cause = cause.__cause__
        seen.add(id(cause))
    return cause


__all__ = [
    "ExceptionHandler",
    "NamespaceReadError",
    "placeholder_namespace",
    "raise_error",
    "report_and_skip",
]
