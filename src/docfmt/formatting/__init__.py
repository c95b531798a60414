"""Formatting engine: run IR, accumulator, text normalization and tree walk."""

from docfmt.formatting.ir import (
    DisplayFormat,
    MemberOptions,
    Run,
    RunKind,
    TypeQualification,
    runs_to_text,
)
from docfmt.formatting.references import (
    ReferenceAppender,
    SymbolRenderer,
    SymbolResolver,
    trim_cref_prefix,
)
from docfmt.formatting.state import FormatterState

__all__ = [
    "DisplayFormat",
    "MemberOptions",
    "Run",
    "RunKind",
    "TypeQualification",
    "runs_to_text",
    "ReferenceAppender",
    "SymbolRenderer",
    "SymbolResolver",
    "trim_cref_prefix",
    "FormatterState",
]
