# tracksax/output/render.py
from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, TextIO

import numpy as np

from ..data.regions import Region
from ..errors import DataInconsistency
from ..sax.sweep import SweepMatrix


SEQUENTIAL = "sequential"
TABULAR = "tabular"

LINE_WIDTH = 60
VALUE_FORMAT = "{:.4f}"


def choose_mode(alpha_start: int, alpha_end: int, force_tabular: bool = False) -> str:
    """Sequential (FASTA-like) for a single alphabet size, tabular otherwise."""
    if alpha_start == alpha_end and not force_tabular:
        return SEQUENTIAL
    return TABULAR


def header_line(mode: str, alpha_start: int, alpha_end: int) -> str:
    """
    Leading '#' comment line recording the alphabet size(s) of the run.

    Tabular output always records a range, even a forced single size
    ('# alphabet size = 4-4').
    """
    if mode == SEQUENTIAL:
        return f"# alphabet size = {alpha_start}"
    return f"# alphabet size = {alpha_start}-{alpha_end}"


def wrap(sax: str, width: int = LINE_WIDTH) -> Iterator[str]:
    """Consecutive slices of at most `width` characters."""
    if width <= 0:
        raise ValueError("width must be a positive integer")
    for i in range(0, len(sax), width):
        yield sax[i : i + width]


def render_sequential(region: Region, sax: str, width: int = LINE_WIDTH) -> Iterator[str]:
    """
    FASTA-like block for one region:

        >chrom:start-end
        <width symbols>
        ...
    """
    yield f">{region.label}"
    yield from wrap(sax, width)


def render_tabular(
    region: Region,
    matrix: SweepMatrix,
    original: Optional[Sequence[float]] = None,
    delimiter: str = "\t",
) -> Iterator[str]:
    """
    One row per position:

        chrom  start  end  symbols  [original_value]

    symbols holds one character per alphabet size, ascending. The original
    (pre-smoothing) value is written with 4 decimals when given.
    """
    if original is not None:
        original = np.asarray(original, dtype=np.float64)
        if original.shape[0] != len(matrix):
            raise DataInconsistency(
                f"{region.label}: {len(matrix)} symbol rows but {original.shape[0]} original values"
            )

    for i, symbols in enumerate(matrix.rows()):
        pos = region.start + i
        fields = [region.chrom, str(pos), str(pos + 1), symbols]
        if original is not None:
            fields.append(VALUE_FORMAT.format(original[i]))
        yield delimiter.join(fields)


def write_lines(sink: TextIO, lines: Iterable[str]) -> int:
    """Write lines with '\\n' terminators. Returns the number written."""
    n = 0
    for line in lines:
        sink.write(line)
        sink.write("\n")
        n += 1
    return n
