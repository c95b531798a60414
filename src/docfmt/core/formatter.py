"""Entry points for formatting documentation comment XML."""

import logging
from typing import Any, Optional

from lxml import etree

from docfmt.config import get_settings
from docfmt.formatting.ir import DisplayFormat, Run
from docfmt.formatting.references import (
    ReferenceAppender,
    SymbolRenderer,
    SymbolResolver,
)
from docfmt.formatting.state import FormatterState
from docfmt.formatting.walker import append_node

logger = logging.getLogger(__name__)

# Fragments may hold several top-level nodes, so they are parsed inside this.
WRAPPER_TAG = "root"


class MalformedInputError(Exception):
    """The comment text is not a well-formed XML fragment."""

    pass


class DocumentationCommentFormatter:
    """Formats documentation comment XML as plain text or display runs.

    Pipeline:
    1. Wrap the raw fragment in a synthetic root element
    2. Parse it, keeping all whitespace
    3. Walk the tree into a fresh FormatterState
    4. Return the runs, or their text
    """

    def __init__(
        self,
        resolver: Optional[SymbolResolver] = None,
        renderer: Optional[SymbolRenderer] = None,
        line_break: Optional[str] = None,
        display_format: Optional[DisplayFormat] = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            resolver: Looks up reference identifiers; None disables lookup
            renderer: Renders resolved symbols; None disables lookup
            line_break: Text of line-break runs (default from settings)
            display_format: How to render resolved symbols when a call
                does not pass its own (default qualification from settings)
        """
        settings = get_settings()
        self.references = ReferenceAppender(resolver=resolver, renderer=renderer)
        self.line_break = line_break if line_break is not None else settings.line_break
        self.display_format = display_format or DisplayFormat(
            qualification=settings.qualification
        )

    def format_to_string(
        self,
        raw_xml_text: Optional[str],
        compilation: Any = None,
    ) -> Optional[str]:
        """Format a comment fragment as a single string.

        Args:
            raw_xml_text: The comment body, or None
            compilation: Resolution context for reference tags, if any

        Returns:
            The formatted text, or None if raw_xml_text is None

        Raises:
            MalformedInputError: If the fragment is not well-formed XML
        """
        if raw_xml_text is None:
            return None

        state = FormatterState(
            display_format=self.display_format, line_break=self.line_break
        )
        self._format(state, raw_xml_text, compilation)
        return state.get_text()

    def format_to_runs(
        self,
        raw_xml_text: Optional[str],
        semantic_model: Any,
        position: int,
        display_format: Optional[DisplayFormat] = None,
    ) -> Optional[list[Run]]:
        """Format a comment fragment as display runs.

        Resolved symbols are rendered relative to ``position`` in
        ``semantic_model``, so names already in scope there can be
        shortened.

        Args:
            raw_xml_text: The comment body, or None
            semantic_model: Context exposing a ``compilation``, or None
            position: Offset used for minimal qualification
            display_format: How to render resolved symbols (default: the
                formatter's own)

        Returns:
            The run sequence, or None if raw_xml_text is None

        Raises:
            MalformedInputError: If the fragment is not well-formed XML
        """
        if raw_xml_text is None:
            return None

        state = FormatterState(
            semantic_model=semantic_model,
            position=position,
            display_format=display_format or self.display_format,
            line_break=self.line_break,
        )
        compilation = getattr(semantic_model, "compilation", None)
        self._format(state, raw_xml_text, compilation)
        return state.runs

    def _format(self, state: FormatterState, raw_xml_text: str, compilation: Any) -> None:
        root = parse_fragment(raw_xml_text)
        append_node(state, root, self.references, compilation)
        logger.debug("Formatted comment into %d run(s)", len(state.runs))


def parse_fragment(raw_xml_text: str) -> etree._Element:
    """Parse a comment fragment under a synthetic root element.

    Raises:
        MalformedInputError: If the fragment is not well-formed XML
    """
    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
    wrapped = f"<{WRAPPER_TAG}>{raw_xml_text}</{WRAPPER_TAG}>"

    try:
        return etree.fromstring(wrapped, parser)
    except etree.XMLSyntaxError as e:
        raise MalformedInputError(f"Malformed documentation comment: {e}") from e
