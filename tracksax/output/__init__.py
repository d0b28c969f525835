# tracksax/output/__init__.py
"""Text renderings of SAX results: FASTA-like blocks and BED4-style rows."""

from .render import (
    LINE_WIDTH,
    SEQUENTIAL,
    TABULAR,
    choose_mode,
    header_line,
    render_sequential,
    render_tabular,
    wrap,
    write_lines,
)

__all__ = [
    "LINE_WIDTH",
    "SEQUENTIAL",
    "TABULAR",
    "choose_mode",
    "header_line",
    "render_sequential",
    "render_tabular",
    "wrap",
    "write_lines",
]
