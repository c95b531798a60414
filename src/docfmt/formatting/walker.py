"""Depth-first walk over a parsed documentation comment."""

from typing import Any

from lxml import etree

from docfmt.formatting.normalizer import append_text_node
from docfmt.formatting.references import ReferenceAppender, is_reference_tag
from docfmt.formatting.state import FormatterState

PARAGRAPH_TAG = "para"


def local_name(element: etree._Element) -> str:
    """Get an element's tag without its namespace."""
    return etree.QName(element).localname


def append_node(
    state: FormatterState,
    element: etree._Element,
    references: ReferenceAppender,
    compilation: Any = None,
) -> None:
    """Append an element and everything below it to the state.

    Text is visited in document order: the element's own text first,
    then each child followed by the child's tail. Tails belong to the
    parent, so they are visited even for reference tags, comments and
    processing instructions, whose own content is not.

    Args:
        state: The accumulator for the current formatting call
        element: Element to walk
        references: Handles reference tags
        compilation: Resolution context for reference tags, if any
    """
    name = local_name(element)

    if is_reference_tag(name):
        references.append(state, name, dict(element.attrib), compilation)
        return

    opened_at = None
    if name == PARAGRAPH_TAG:
        opened_at = state.begin_paragraph()

    if element.text:
        append_text_node(state, element.text)

    for child in element:
        # Comments and processing instructions have a non-string tag
        if isinstance(child.tag, str):
            append_node(state, child, references, compilation)
        if child.tail:
            append_text_node(state, child.tail)

    if name == PARAGRAPH_TAG:
        state.end_paragraph(opened_at)
