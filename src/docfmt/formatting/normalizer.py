"""Whitespace normalization for XML text nodes."""

from docfmt.formatting.state import FormatterState


def append_text_node(state: FormatterState, raw_text: str) -> None:
    """Append one text node to the state, collapsing whitespace.

    Every run of whitespace becomes at most one space. Whitespace before
    the first character of the whole output is dropped. Whitespace at the
    edges of the node is handed to the state as a pending space so that
    neighbouring nodes can share it.

    Args:
        state: The accumulator for the current formatting call
        raw_text: The node's text, exactly as parsed
    """
    buffer: list[str] = []
    pending_whitespace = False
    had_any_non_whitespace = False

    for char in raw_text:
        if char.isspace():
            # Only the very start of the output drops whitespace outright.
            if not state.at_beginning or had_any_non_whitespace:
                pending_whitespace = True
            continue

        if pending_whitespace:
            if not buffer:
                state.append_single_space()
            else:
                buffer.append(" ")
            pending_whitespace = False

        buffer.append(char)
        had_any_non_whitespace = True

    if buffer:
        state.append_text("".join(buffer))

    if pending_whitespace:
        state.append_single_space()
