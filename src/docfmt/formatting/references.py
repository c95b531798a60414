"""Resolution of symbol-reference tags (``<see>``, ``<paramref>``, ...).

The formatter never looks symbols up itself. It is handed a resolver
and a renderer that follow the two protocols below, and either splices
the rendered symbol into the output or falls back to the identifier as
literal text.
"""

import logging
import re
from typing import Any, Optional, Protocol

from docfmt.formatting.ir import CONSTRUCTOR_MEMBER_OPTIONS, DisplayFormat, Run
from docfmt.formatting.state import FormatterState

logger = logging.getLogger(__name__)

# Reference tag name -> attribute holding the identifier
REFERENCE_ATTRIBUTES: dict[str, str] = {
    "see": "cref",
    "seealso": "cref",
    "paramref": "name",
    "typeparamref": "name",
}

# Documentation ID type marker, e.g. "T:" in "T:System.String"
CREF_PREFIX_PATTERN = re.compile(r"^.:")


class SymbolResolver(Protocol):
    """Maps a reference identifier to a symbol within a compilation."""

    def resolve(self, identifier: str, compilation: Any) -> Optional[Any]:
        ...


class SymbolRenderer(Protocol):
    """Turns a resolved symbol into display runs."""

    def render(
        self,
        symbol: Any,
        display_format: DisplayFormat,
        semantic_model: Any = None,
        position: Optional[int] = None,
    ) -> list[Run]:
        ...


def is_reference_tag(name: str) -> bool:
    return name in REFERENCE_ATTRIBUTES


def trim_cref_prefix(value: str) -> str:
    """Strip a leading one-character ``X:`` documentation ID marker, if present."""
    return CREF_PREFIX_PATTERN.sub("", value, count=1)


class ReferenceAppender:
    """Appends reference tags to a FormatterState.

    Attributes:
        resolver: Symbol lookup, or None to always use literal text
        renderer: Symbol display, or None to always use literal text
    """

    def __init__(
        self,
        resolver: Optional[SymbolResolver] = None,
        renderer: Optional[SymbolRenderer] = None,
    ) -> None:
        self.resolver = resolver
        self.renderer = renderer

    def append(
        self,
        state: FormatterState,
        tag: str,
        attributes: dict[str, str],
        compilation: Any = None,
    ) -> None:
        """Append the reference tag ``tag`` with the given attributes.

        Args:
            state: The accumulator for the current formatting call
            tag: Local element name (one of REFERENCE_ATTRIBUTES)
            attributes: The element's attributes
            compilation: Resolution context, or None if unavailable
        """
        attribute = REFERENCE_ATTRIBUTES[tag]
        identifier = attributes.get(attribute)

        if identifier is None:
            logger.debug("<%s> without a %s attribute skipped", tag, attribute)
            return

        if compilation is not None and self.try_append_symbol(
            state, self._resolve(identifier, compilation)
        ):
            return

        logger.debug("Reference %r rendered as literal text", identifier)
        state.append_text(trim_cref_prefix(identifier))

    def try_append_symbol(self, state: FormatterState, symbol: Any) -> bool:
        """Render ``symbol`` into the state. Returns False if there is none."""
        if symbol is None or self.renderer is None:
            return False

        display_format = state.display_format
        if getattr(symbol, "is_constructor", False):
            display_format = display_format.with_member_options(
                CONSTRUCTOR_MEMBER_OPTIONS
            )

        if state.semantic_model is not None:
            runs = self.renderer.render(
                symbol,
                display_format,
                semantic_model=state.semantic_model,
                position=state.position,
            )
        else:
            runs = self.renderer.render(symbol, display_format)

        state.append_runs(runs)
        return True

    def _resolve(self, identifier: str, compilation: Any) -> Optional[Any]:
        if self.resolver is None:
            return None
        return self.resolver.resolve(identifier, compilation)
