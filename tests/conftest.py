"""Pytest fixtures for docfmt tests."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import pytest

from docfmt import config
from docfmt.core.formatter import DocumentationCommentFormatter
from docfmt.formatting.ir import DisplayFormat, Run, RunKind
from docfmt.symbols import SymbolTable


@dataclass(frozen=True)
class FakeSymbol:
    """Minimal symbol for fake resolution."""

    name: str
    is_constructor: bool = False


class FakeResolver:
    """Resolver backed by a dict that records every lookup."""

    def __init__(self, symbols: dict[str, FakeSymbol]) -> None:
        self.symbols = symbols
        self.calls: list[tuple[str, Any]] = []

    def resolve(self, identifier: str, compilation: Any) -> Optional[FakeSymbol]:
        self.calls.append((identifier, compilation))
        return self.symbols.get(identifier)


class FakeRenderer:
    """Renders a symbol as its name, plus "(...)" when parameters are on."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def render(
        self,
        symbol: FakeSymbol,
        display_format: DisplayFormat,
        semantic_model: Any = None,
        position: Optional[int] = None,
    ) -> list[Run]:
        self.calls.append(
            {
                "symbol": symbol,
                "format": display_format,
                "semantic_model": semantic_model,
                "position": position,
            }
        )
        runs = [Run(RunKind.TYPE_NAME, symbol.name)]
        if display_format.include_parameters:
            runs.append(Run(RunKind.PUNCTUATION, "(...)"))
        return runs


@dataclass
class FakeSemanticModel:
    compilation: Any


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the environment and the cached settings."""
    for name in ("DOCFMT_LINE_BREAK", "DOCFMT_QUALIFICATION", "DOCFMT_SYMBOLS"):
        monkeypatch.delenv(name, raising=False)
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def formatter() -> DocumentationCommentFormatter:
    """Formatter without any symbol resolution."""
    return DocumentationCommentFormatter()


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver(
        {
            "T:My.Type": FakeSymbol("Type"),
            "M:My.Type.#ctor(System.Int32)": FakeSymbol("Type", is_constructor=True),
        }
    )


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def resolving_formatter(
    fake_resolver: FakeResolver, fake_renderer: FakeRenderer
) -> DocumentationCommentFormatter:
    """Formatter wired to the fake resolver and renderer."""
    return DocumentationCommentFormatter(resolver=fake_resolver, renderer=fake_renderer)


@pytest.fixture
def sample_ids() -> list[str]:
    """Documentation IDs for a small widget library."""
    return [
        "N:My.Ns",
        "T:My.Ns.Widget",
        "T:My.Ns.Widget.Part",
        "M:My.Ns.Widget.#ctor(System.Int32)",
        "M:My.Ns.Widget.Resize(System.Int32,System.String)",
        "M:My.Ns.Widget.System#IDisposable#Dispose",
        "P:My.Ns.Widget.Item(System.Int32)",
        "P:My.Ns.Widget.Size",
        "F:My.Ns.Widget.count",
    ]


@pytest.fixture
def symbol_table(sample_ids: list[str]) -> SymbolTable:
    return SymbolTable.from_ids(sample_ids)


@pytest.fixture
def symbols_file(tmp_path: Path, sample_ids: list[str]) -> Path:
    """Symbol file importing My.Ns from position 100 onward."""
    file_path = tmp_path / "symbols.json"
    file_path.write_text(
        json.dumps({"symbols": sample_ids, "imports": [[100, ["My.Ns"]]]}),
        encoding="utf-8",
    )
    return file_path
