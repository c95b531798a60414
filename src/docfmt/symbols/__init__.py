"""Reference symbol resolver and renderer backed by documentation IDs."""

from docfmt.symbols.model import Symbol, SymbolKind, parse_documentation_id
from docfmt.symbols.table import (
    SemanticModel,
    SymbolTable,
    SymbolTableError,
    SymbolTableResolver,
    load_symbols,
)
from docfmt.symbols.display import SymbolDisplayRenderer

__all__ = [
    "Symbol",
    "SymbolKind",
    "parse_documentation_id",
    "SemanticModel",
    "SymbolTable",
    "SymbolTableError",
    "SymbolTableResolver",
    "load_symbols",
    "SymbolDisplayRenderer",
]
