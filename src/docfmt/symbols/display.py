"""Rendering of symbols into typed display runs."""

import re
from typing import Iterable, Optional

from docfmt.formatting.ir import (
    DisplayFormat,
    MemberOptions,
    Run,
    RunKind,
    SPACE,
    TypeQualification,
)
from docfmt.symbols.model import Symbol, SymbolKind, strip_arity
from docfmt.symbols.table import SemanticModel

# Framework types shown by their language keyword
KEYWORD_ALIASES: dict[str, str] = {
    "System.Boolean": "bool",
    "System.Byte": "byte",
    "System.SByte": "sbyte",
    "System.Char": "char",
    "System.Decimal": "decimal",
    "System.Double": "double",
    "System.Single": "float",
    "System.Int16": "short",
    "System.Int32": "int",
    "System.Int64": "long",
    "System.UInt16": "ushort",
    "System.UInt32": "uint",
    "System.UInt64": "ulong",
    "System.Object": "object",
    "System.String": "string",
    "System.Void": "void",
}

TYPE_TOKEN_PATTERN = re.compile(
    r"\[[^\]]*\]|``?\d+|[A-Za-z_][\w`]*(?:\.[A-Za-z_][\w`]*)*|\S"
)
TYPE_PUNCTUATION = {"{": "<", "}": ">", "*": "*"}

# Generic parameters referenced by position: ``n on the method, `n on the type
METHOD_TYPE_PARAMETER = "TM{}"
TYPE_PARAMETER = "T{}"

DOT = Run(RunKind.PUNCTUATION, ".")


def punctuation(text: str) -> Run:
    return Run(RunKind.PUNCTUATION, text)


def dotted(names: Iterable[str], kind: RunKind) -> list[Run]:
    """Render names joined by dots, each as a ``kind`` run."""
    runs: list[Run] = []
    for name in names:
        if runs:
            runs.append(DOT)
        runs.append(Run(kind, name))
    return runs


def parameter_type_runs(type_id: str) -> list[Run]:
    """Render one parameter type from its documentation ID form.

    ``System.Collections.Generic.List{System.Int32}`` becomes
    ``List<int>``; a trailing ``@`` (by-reference) becomes ``ref``.
    Array bounds are dropped, keeping the rank (``[0:,0:]`` becomes
    ``[,]``), and positional generic parameters get placeholder names
    (``TM0`` for ````0``, ``T0`` for ```0``).
    """
    runs: list[Run] = []
    if type_id.endswith("@"):
        runs.extend([Run(RunKind.KEYWORD, "ref"), SPACE])
        type_id = type_id[:-1]

    for token in TYPE_TOKEN_PATTERN.findall(type_id):
        if token == ",":
            runs.extend([punctuation(","), SPACE])
        elif token.startswith("["):
            runs.append(punctuation("[" + "," * token.count(",") + "]"))
        elif token in TYPE_PUNCTUATION:
            runs.append(punctuation(TYPE_PUNCTUATION[token]))
        elif token in KEYWORD_ALIASES:
            runs.append(Run(RunKind.KEYWORD, KEYWORD_ALIASES[token]))
        elif token.startswith("``"):
            runs.append(Run(RunKind.TYPE_NAME, METHOD_TYPE_PARAMETER.format(token[2:])))
        elif token.startswith("`"):
            runs.append(Run(RunKind.TYPE_NAME, TYPE_PARAMETER.format(token[1:])))
        else:
            runs.append(Run(RunKind.TYPE_NAME, strip_arity(token.rsplit(".", 1)[-1])))

    return runs


class SymbolDisplayRenderer:
    """Renders a Symbol according to a DisplayFormat.

    With a semantic model and position, namespaces imported at that
    position are left out of fully qualified names.
    """

    def render(
        self,
        symbol: Symbol,
        display_format: DisplayFormat,
        semantic_model: Optional[SemanticModel] = None,
        position: Optional[int] = None,
    ) -> list[Run]:
        """Render ``symbol`` as display runs.

        Args:
            symbol: The symbol to render
            display_format: Qualification and member options
            semantic_model: Context for minimal qualification, if any
            position: Position within the semantic model

        Returns:
            List of runs, never empty
        """
        imported = semantic_model.imports_at(position) if semantic_model else set()

        if symbol.kind == SymbolKind.NAMESPACE:
            if display_format.qualification == TypeQualification.FULLY_QUALIFIED:
                return dotted((*symbol.namespace, symbol.name), RunKind.NAMESPACE_NAME)
            return [Run(RunKind.NAMESPACE_NAME, symbol.name)]

        if symbol.kind == SymbolKind.TYPE:
            return self._type_runs(
                symbol.namespace,
                (*symbol.containing_types, symbol.name),
                display_format,
                imported,
            )

        if symbol.kind == SymbolKind.CONSTRUCTOR:
            runs = self._type_runs(
                symbol.namespace, symbol.containing_types, display_format, imported
            )
        else:
            runs = self._member_name_runs(symbol, display_format, imported)

        if display_format.include_parameters and symbol.parameters is not None:
            runs.extend(self._parameter_runs(symbol))

        return runs

    def _member_name_runs(
        self,
        symbol: Symbol,
        display_format: DisplayFormat,
        imported: set[str],
    ) -> list[Run]:
        runs: list[Run] = []

        if display_format.include_containing_type and symbol.containing_types:
            runs.extend(
                self._type_runs(
                    symbol.namespace, symbol.containing_types, display_format, imported
                )
            )
            runs.append(DOT)

        explicit = MemberOptions.INCLUDE_EXPLICIT_INTERFACE in display_format.member_options
        if explicit and symbol.explicit_interface:
            runs.append(Run(RunKind.TYPE_NAME, symbol.explicit_interface.rsplit(".", 1)[-1]))
            runs.append(DOT)

        runs.append(Run(RunKind.MEMBER_NAME, symbol.name))
        return runs

    def _type_runs(
        self,
        namespace: tuple[str, ...],
        types: tuple[str, ...],
        display_format: DisplayFormat,
        imported: set[str],
    ) -> list[Run]:
        qualification = display_format.qualification

        if qualification == TypeQualification.NAME_ONLY:
            return [Run(RunKind.TYPE_NAME, types[-1])]

        runs: list[Run] = []
        if qualification == TypeQualification.FULLY_QUALIFIED and namespace:
            if ".".join(namespace) not in imported:
                runs.extend(dotted(namespace, RunKind.NAMESPACE_NAME))
                runs.append(DOT)

        runs.extend(dotted(types, RunKind.TYPE_NAME))
        return runs

    def _parameter_runs(self, symbol: Symbol) -> list[Run]:
        # Indexers list their parameters in brackets
        open_, close = ("[", "]") if symbol.kind == SymbolKind.PROPERTY else ("(", ")")

        runs = [punctuation(open_)]
        for i, parameter in enumerate(symbol.parameters or ()):
            if i:
                runs.extend([punctuation(","), SPACE])
            runs.extend(parameter_type_runs(parameter))
        runs.append(punctuation(close))
        return runs
