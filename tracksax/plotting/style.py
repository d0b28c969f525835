# tracksax/plotting/style.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib as mpl
import matplotlib.pyplot as plt


PathLike = Union[str, Path]


@dataclass(frozen=True)
class PlotSettings:
    """
    Centralized figure settings for SAX diagnostic plots.
    """
    figsize: Tuple[float, float] = (12, 5)
    dpi: int = 150
    font_size: int = 11
    tick_size: int = 10
    legend_size: int = 10

    line_width: float = 1.0
    axis_line_width: float = 0.8

    breakpoint_color: str = "0.55"
    symbol_size: int = 9


def apply_plot_defaults(cfg: PlotSettings = PlotSettings()) -> None:
    """Apply rcParams: thin lines, visible spines, compact fonts."""
    mpl.rcParams.update({
        "font.size": cfg.font_size,
        "axes.labelsize": cfg.font_size,
        "xtick.labelsize": cfg.tick_size,
        "ytick.labelsize": cfg.tick_size,
        "legend.fontsize": cfg.legend_size,

        "lines.linewidth": cfg.line_width,
        "axes.linewidth": cfg.axis_line_width,

        "xtick.direction": "out",
        "ytick.direction": "out",

        "axes.grid": False,

        "savefig.dpi": cfg.dpi,
        "figure.dpi": cfg.dpi,
    })


def save_figure(
    fig: plt.Figure,
    outpath_no_ext: PathLike,
    save_pdf: bool = True,
    save_svg: bool = True,
    tight: bool = True,
) -> Tuple[Optional[Path], Optional[Path]]:
    """
    Save a figure as PDF and/or SVG using a single base path.

    Args:
        fig: matplotlib Figure
        outpath_no_ext: path without extension, e.g. "figures/chr1_0-1000"

    Returns:
        (pdf_path, svg_path)
    """
    outpath_no_ext = Path(outpath_no_ext)
    outpath_no_ext.parent.mkdir(parents=True, exist_ok=True)

    bbox = "tight" if tight else None
    pdf_path = None
    svg_path = None

    if save_pdf:
        pdf_path = outpath_no_ext.parent / f"{outpath_no_ext.name}.pdf"
        fig.savefig(pdf_path, format="pdf", bbox_inches=bbox)

    if save_svg:
        svg_path = outpath_no_ext.parent / f"{outpath_no_ext.name}.svg"
        fig.savefig(svg_path, format="svg", bbox_inches=bbox)

    return pdf_path, svg_path
