# tracksax/plotting/sax.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.transforms as transforms

from ..data.normalization import NormParams
from ..sax.breakpoints import breakpoints
from ..sax.encoder import prepare, quantize, to_symbols
from .style import PlotSettings, apply_plot_defaults, save_figure


PathLike = Union[str, Path]

# above this many labels the symbol row becomes unreadable
MAX_SYMBOL_LABELS = 200


def plot_sax(
    values: Sequence[float],
    alphabet_size: int,
    window: int = 0,
    params: Optional[NormParams] = None,
    start: int = 0,
    title: Optional[str] = None,
    outpath_no_ext: Optional[PathLike] = None,
    cfg: PlotSettings = PlotSettings(),
    show: bool = False,
) -> plt.Figure:
    """
    Plot the normalized (smoothed) series against the SAX breakpoints.

    Draws:
        - z-normalized signal as a step line
        - one horizontal line per breakpoint
        - the symbol of each window (or each position if window == 0),
          along the top of the axes, when there are few enough to read

    Args:
        values: raw per-base signal
        start: genomic coordinate of values[0], used for the x-axis
        outpath_no_ext: if provided, saves PDF+SVG to this base path
    """
    apply_plot_defaults(cfg)

    z = prepare(np.asarray(values, dtype=float), window, params)
    symbols = to_symbols(quantize(z, alphabet_size))
    x = start + np.arange(len(z))

    fig = plt.figure(figsize=cfg.figsize)
    ax = fig.gca()

    ax.step(x, z, where="post", label="normalized signal")
    for bp in breakpoints(alphabet_size):
        ax.axhline(bp, color=cfg.breakpoint_color, linestyle="dashed", linewidth=0.6)

    step = window if window > 0 else 1
    label_idx = np.arange(0, len(z), step)
    if 0 < len(label_idx) <= MAX_SYMBOL_LABELS:
        trans = transforms.blended_transform_factory(ax.transData, ax.transAxes)
        for i in label_idx:
            ax.text(x[i] + step / 2, 1.01, symbols[i], ha="center", va="bottom",
                    fontsize=cfg.symbol_size, transform=trans)
            if window > 0:
                ax.axvline(x[i], color="k", linestyle="dotted", alpha=0.3, linewidth=0.6)

    ax.set_xlabel("Position")
    ax.set_ylabel("z")
    if title:
        ax.set_title(title, pad=18)
    ax.legend(loc="best")

    fig.tight_layout()

    if outpath_no_ext is not None:
        save_figure(fig, outpath_no_ext)

    if show:
        plt.show()
    else:
        plt.close(fig)

    return fig
