"""Documentation metadata extraction for ClojureScript source trees."""

from .failsafe import NamespaceReadError
from .models import DefinitionRecord, NamespaceRecord, Symbol
from .reader import ReadOptions, read_namespaces

__version__ = "0.1.0"

__all__ = [
    "DefinitionRecord",
    "NamespaceReadError",
    "NamespaceRecord",
    "ReadOptions",
    "Symbol",
    "read_namespaces",
]
