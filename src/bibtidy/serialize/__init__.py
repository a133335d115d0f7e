"""BibTeX serialization."""

from bibtidy.serialize.writer import render_comment, render_entry, render_value, serialize

__all__ = ["serialize", "render_entry", "render_value", "render_comment"]
