"""Dependency scanning and public-definition classification."""

from .dependencies import collect_foreign_modules
from .publics import read_definition, read_publics, var_type

__all__ = [
    "collect_foreign_modules",
    "read_definition",
    "read_publics",
    "var_type",
]
