"""Run accumulator with deferred whitespace emission."""

from typing import Any, Iterable, Optional

from docfmt.formatting.ir import (
    DEFAULT_LINE_BREAK,
    DisplayFormat,
    LINE_BREAK,
    Run,
    RunKind,
    SPACE,
    runs_to_text,
    text_run,
)


class FormatterState:
    """Collects runs for one formatting call.

    Whitespace is never written eagerly. Spaces and paragraph breaks are
    only marked as pending and get flushed right before the next piece of
    real content, so leading and trailing whitespace never reaches the
    output and empty paragraphs collapse to nothing.

    Attributes:
        runs: The emitted runs, in order (append-only)
        semantic_model: Optional context for minimal qualification
        position: Position inside the semantic model's source
        display_format: Format handed to the symbol renderer
    """

    def __init__(
        self,
        semantic_model: Any = None,
        position: Optional[int] = None,
        display_format: Optional[DisplayFormat] = None,
        line_break: str = DEFAULT_LINE_BREAK,
    ) -> None:
        self.runs: list[Run] = []
        self.semantic_model = semantic_model
        self.position = position
        self.display_format = display_format or DisplayFormat.default()

        if line_break == LINE_BREAK.text:
            self._line_break = LINE_BREAK
        else:
            self._line_break = Run(RunKind.LINE_BREAK, line_break)

        self._any_non_whitespace_since_last_para = False
        self._pending_paragraph_break = False
        self._pending_single_space = False

    @property
    def at_beginning(self) -> bool:
        """True until the first run has been emitted."""
        return not self.runs

    def append_single_space(self) -> None:
        self._pending_single_space = True

    def append_text(self, text: str) -> None:
        """Flush pending whitespace, then append a TEXT run."""
        self._emit_pending()
        self.runs.append(text_run(text))
        self._any_non_whitespace_since_last_para = True

    def append_runs(self, runs: Iterable[Run]) -> None:
        """Flush pending whitespace, then append pre-rendered runs."""
        self._emit_pending()
        self.runs.extend(runs)
        self._any_non_whitespace_since_last_para = True

    def mark_paragraph_boundary(self) -> bool:
        """Request a blank line before the next content.

        Called on both entry to and exit from a ``<para>``. Does nothing
        if no content was appended since the previous boundary.

        Returns:
            True if this call requested a new paragraph break
        """
        if not self._any_non_whitespace_since_last_para:
            return False

        self._pending_paragraph_break = True
        self._any_non_whitespace_since_last_para = False
        return True

    def begin_paragraph(self) -> Optional[int]:
        """Open a ``<para>``.

        Returns:
            Token to pass to :meth:`end_paragraph`; None if no break
            was requested
        """
        if self.mark_paragraph_boundary():
            return len(self.runs)
        return None

    def end_paragraph(self, opened_at: Optional[int]) -> None:
        """Close a ``<para>`` opened with :meth:`begin_paragraph`.

        A paragraph that emitted nothing withdraws the break its opening
        requested, so ``A<para> </para>B`` stays on one line.
        """
        if opened_at is not None and len(self.runs) == opened_at:
            self._pending_paragraph_break = False
            self._any_non_whitespace_since_last_para = True
            return

        self.mark_paragraph_boundary()

    def get_text(self) -> str:
        return runs_to_text(self.runs)

    def _emit_pending(self) -> None:
        # A paragraph break swallows any pending space.
        if self._pending_paragraph_break:
            self.runs.append(self._line_break)
            self.runs.append(self._line_break)
        elif self._pending_single_space:
            self.runs.append(SPACE)

        self._pending_paragraph_break = False
        self._pending_single_space = False
