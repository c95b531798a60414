"""In-memory symbol table and the resolver built on it."""

import logging
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from docfmt.symbols.model import Symbol, parse_documentation_id

logger = logging.getLogger(__name__)


class SymbolTableError(Exception):
    """A symbol file could not be read or is invalid."""

    pass


class SymbolFile(BaseModel):
    """On-disk layout of a symbol table.

    ``imports`` holds ``[position, [namespace, ...]]`` pairs: the listed
    namespaces are in scope from ``position`` onward.
    """

    symbols: list[str] = Field(default_factory=list)
    imports: list[tuple[int, list[str]]] = Field(default_factory=list)


class SymbolTable:
    """Symbols keyed by documentation ID.

    Plays the part of a compilation: references are resolved against it.
    """

    def __init__(self, symbols: Iterable[Symbol] = ()) -> None:
        self._symbols: dict[str, Symbol] = {}
        for symbol in symbols:
            self.add(symbol)

    @classmethod
    def from_ids(cls, documentation_ids: Iterable[str]) -> "SymbolTable":
        """Build a table from documentation IDs.

        Raises:
            ValueError: If any ID is invalid
        """
        ids = [doc_id.strip() for doc_id in documentation_ids]
        type_names = {doc_id[2:] for doc_id in ids if doc_id.startswith("T:")}
        return cls(parse_documentation_id(doc_id, type_names) for doc_id in ids)

    def add(self, symbol: Symbol) -> None:
        key = symbol.documentation_id.strip()
        # First declaration wins, matching lookup of the first symbol for an ID
        self._symbols.setdefault(key, symbol)

    def resolve(self, identifier: str) -> Optional[Symbol]:
        """Get the symbol declared with exactly this ID, if any."""
        return self._symbols.get(identifier.strip())

    def __len__(self) -> int:
        return len(self._symbols)


class SemanticModel:
    """A symbol table plus the namespaces imported at each position.

    Attributes:
        compilation: The table references are resolved against
        import_scopes: (position, namespaces) pairs, sorted by position
    """

    def __init__(
        self,
        compilation: SymbolTable,
        import_scopes: Iterable[tuple[int, Iterable[str]]] = (),
    ) -> None:
        self.compilation = compilation
        self.import_scopes = sorted(
            ((position, tuple(namespaces)) for position, namespaces in import_scopes),
            key=lambda scope: scope[0],
        )

    def imports_at(self, position: Optional[int]) -> set[str]:
        """Namespaces in scope at ``position``."""
        if position is None:
            return set()

        imported: set[str] = set()
        for start, namespaces in self.import_scopes:
            if start > position:
                break
            imported.update(namespaces)
        return imported


class SymbolTableResolver:
    """Resolves documentation IDs against a SymbolTable."""

    def resolve(self, identifier: str, compilation: SymbolTable) -> Optional[Symbol]:
        # Bare names (e.g. a paramref's "value") carry no kind marker
        if len(identifier) < 2 or identifier[1] != ":":
            return None
        return compilation.resolve(identifier)


def load_symbols(path: Path) -> SemanticModel:
    """Load a symbol file into a SemanticModel.

    Args:
        path: JSON file with ``symbols`` and optional ``imports``

    Returns:
        SemanticModel whose compilation holds the file's symbols

    Raises:
        SymbolTableError: If the file is missing, malformed or holds a bad ID
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SymbolTableError(f"Cannot read symbol file {path}: {e}") from e

    try:
        data = SymbolFile.model_validate_json(raw)
        table = SymbolTable.from_ids(data.symbols)
    except (ValidationError, ValueError) as e:
        raise SymbolTableError(f"Invalid symbol file {path}: {e}") from e

    logger.debug("Loaded %d symbol(s) from %s", len(table), path)
    return SemanticModel(table, data.imports)
