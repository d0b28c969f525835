# tracksax/plotting/__init__.py
"""Diagnostic SAX figures (matplotlib)."""

from .style import PlotSettings, apply_plot_defaults, save_figure
from .sax import plot_sax

__all__ = ["PlotSettings", "apply_plot_defaults", "save_figure", "plot_sax"]
