"""Entry points for formatting documentation comments."""

from docfmt.core.formatter import DocumentationCommentFormatter, MalformedInputError

__all__ = [
    "DocumentationCommentFormatter",
    "MalformedInputError",
]
