"""docfmt - formats XML documentation comments as text or display runs."""

__version__ = "0.1.0"
