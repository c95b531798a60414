"""Symbols parsed from documentation IDs.

A documentation ID is the ``cref`` form a compiler writes into XML doc
files, e.g. ``M:My.Ns.Widget.#ctor(System.Int32)``. The first character
names the kind of symbol; the rest is its dotted, fully qualified name
with an optional parameter list.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class SymbolKind(Enum):
    """Kinds of symbol a documentation ID can name."""

    NAMESPACE = "N"
    TYPE = "T"
    METHOD = "M"
    PROPERTY = "P"
    FIELD = "F"
    EVENT = "E"
    CONSTRUCTOR = "ctor"


ID_PATTERN = re.compile(
    r"^(?P<prefix>[NTMPFE]):(?P<name>[^(~]+)(?:\((?P<params>.*?)\))?(?:~.+)?$"
)
ARITY_PATTERN = re.compile(r"``?\d+$")
CONSTRUCTOR_NAMES = ("#ctor", "#cctor")


@dataclass(frozen=True)
class Symbol:
    """A declared symbol.

    Attributes:
        documentation_id: The ID the symbol was parsed from
        kind: What kind of symbol this is
        name: Simple name (for constructors, the type's name)
        namespace: Enclosing namespace segments
        containing_types: Enclosing type names, outermost first
        parameters: Parameter type IDs, or None if the symbol takes none
        explicit_interface: Interface an explicit implementation belongs to
    """

    documentation_id: str
    kind: SymbolKind
    name: str
    namespace: tuple[str, ...] = ()
    containing_types: tuple[str, ...] = ()
    parameters: Optional[tuple[str, ...]] = None
    explicit_interface: Optional[str] = None

    @property
    def is_constructor(self) -> bool:
        return self.kind == SymbolKind.CONSTRUCTOR


def split_parameters(params: str) -> tuple[str, ...]:
    """Split a parameter list at top-level commas."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []

    for char in params:
        if char in "{[":
            depth += 1
        elif char in "}]":
            depth -= 1
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    if current or parts:
        parts.append("".join(current))

    return tuple(part.strip() for part in parts)


def strip_arity(name: str) -> str:
    """Drop a generic arity suffix (``List`1`` -> ``List``)."""
    return ARITY_PATTERN.sub("", name)


def parse_documentation_id(
    documentation_id: str,
    type_names: Iterable[str] = (),
) -> Symbol:
    """Parse a documentation ID into a Symbol.

    Whether a dotted segment is a namespace or a type cannot be told
    from the ID alone. ``type_names`` lists the full names (without
    prefix) of known types; any leading segments not covered by one are
    taken as namespace. A member with no known type is assumed to live
    in its last container segment.

    Args:
        documentation_id: ID such as ``T:My.Ns.Widget``
        type_names: Full names of types declared alongside

    Returns:
        The parsed Symbol

    Raises:
        ValueError: If the ID is not a recognised documentation ID
    """
    match = ID_PATTERN.match(documentation_id.strip())
    if not match:
        raise ValueError(f"Invalid documentation ID: {documentation_id!r}")

    kind = SymbolKind(match.group("prefix"))
    segments = match.group("name").split(".")
    if any(not segment for segment in segments):
        raise ValueError(f"Invalid documentation ID: {documentation_id!r}")

    *container, name = segments

    if kind == SymbolKind.NAMESPACE:
        return Symbol(documentation_id, kind, name, namespace=tuple(container))

    namespace, containing_types = _split_container(container, set(type_names), kind)

    raw_params = match.group("params")
    parameters = split_parameters(raw_params) if raw_params is not None else None

    explicit_interface = None
    if kind == SymbolKind.METHOD and name in CONSTRUCTOR_NAMES:
        if not containing_types:
            raise ValueError(f"Constructor without a type: {documentation_id!r}")
        kind = SymbolKind.CONSTRUCTOR
        name = containing_types[-1]
    elif "#" in name:
        interface, _, name = name.rpartition("#")
        explicit_interface = strip_arity(interface.replace("#", "."))

    if kind in (SymbolKind.METHOD, SymbolKind.CONSTRUCTOR) and parameters is None:
        parameters = ()

    return Symbol(
        documentation_id=documentation_id,
        kind=kind,
        name=strip_arity(name),
        namespace=tuple(namespace),
        containing_types=tuple(strip_arity(t) for t in containing_types),
        parameters=parameters,
        explicit_interface=explicit_interface,
    )


def _split_container(
    container: list[str],
    type_names: set[str],
    kind: SymbolKind,
) -> tuple[list[str], list[str]]:
    """Split container segments into (namespace, containing types)."""
    for i in range(1, len(container) + 1):
        if ".".join(container[:i]) in type_names:
            return container[: i - 1], container[i - 1 :]

    if kind != SymbolKind.TYPE and container:
        return container[:-1], container[-1:]

    return container, []
