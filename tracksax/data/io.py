# tracksax/data/io.py
from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Protocol, Sequence, TextIO, Union

import numpy as np
import pandas as pd

from ..errors import TrackIOError
from .regions import Region


PathLike = Union[str, Path]

_HEADER_PREFIXES = ("#", "track", "browser")


def read_bed_columns(path: PathLike, names: Sequence[str]) -> pd.DataFrame:
    """
    Read the leading columns of a BED-like, tab-separated file.

    - 'track', 'browser' and '#' lines are skipped.
    - Only the first len(names) columns are kept.
    - Coordinates (every column after the first) are coerced to numeric;
      rows where that fails are dropped.

    Returns:
        pd.DataFrame with columns `names`, file order preserved.
    """
    p = Path(path)
    if not p.is_file():
        raise TrackIOError(f"File not found: {p}")

    try:
        with p.open("r", encoding="utf-8") as f:
            lines = [ln for ln in f if ln.strip() and not ln.startswith(_HEADER_PREFIXES)]
    except (OSError, UnicodeDecodeError) as exc:
        raise TrackIOError(f"Could not read {p}: {exc}") from exc

    if not lines:
        return pd.DataFrame(columns=list(names))

    # ragged rows (BED3 next to BED6) are fine; size the frame to the widest
    n_fields = max(ln.rstrip("\r\n").count("\t") for ln in lines) + 1
    if n_fields < len(names):
        raise TrackIOError(f"Malformed file {p}: expected >= {len(names)} tab-separated columns")

    try:
        df = pd.read_csv(
            io.StringIO("".join(lines)),
            sep="\t",
            header=None,
            names=list(range(n_fields)),
            usecols=list(range(len(names))),
            dtype={0: str},
        )
    except (ValueError, pd.errors.ParserError) as exc:
        raise TrackIOError(f"Malformed file {p}: {exc}") from exc

    df.columns = list(names)
    for col in names[1:]:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df.dropna(subset=list(names[1:])).reset_index(drop=True)


def load_regions_bed(path: PathLike) -> List[Region]:
    """Read regions from the first three columns of a BED file, in file order."""
    df = read_bed_columns(path, ["chrom", "start", "end"])
    return [Region(str(c), int(s), int(e)) for c, s, e in df.itertuples(index=False)]


class TrackSource(Protocol):
    """What the SAX pipeline needs from a signal track."""

    def regions(self) -> List[Region]:
        ...

    def values(self, region: Region) -> np.ndarray:
        ...


class BedGraphTrack:
    """
    Per-base signal backed by a bedGraph file (chrom, start, end, value).

    Bases not covered by any interval read as NaN. When intervals overlap,
    the later line wins.

    Intervals are kept per chromosome sorted by start, alongside the running
    maximum of their ends, so a region lookup only touches the intervals that
    overlap it.
    """

    def __init__(self, path: PathLike):
        self.path = Path(path)
        df = read_bed_columns(self.path, ["chrom", "start", "end", "value"])
        df["start"] = df["start"].astype(np.int64)
        df["end"] = df["end"].astype(np.int64)
        self._df = df
        self._by_chrom = {
            chrom: _ChromIntervals.from_frame(grp)
            for chrom, grp in df.groupby("chrom", sort=False)
        }

    def __repr__(self) -> str:
        return f"BedGraphTrack({str(self.path)!r}, intervals={len(self._df)})"

    def chroms(self) -> List[str]:
        """Chromosome names in order of first appearance."""
        return list(self._by_chrom.keys())

    def regions(self) -> List[Region]:
        """One region per chromosome, spanning its covered extent."""
        return [
            Region(chrom, int(iv.starts[0]), int(iv.reach[-1]))
            for chrom, iv in self._by_chrom.items()
        ]

    def values(self, region: Region) -> np.ndarray:
        """Per-base values covering exactly [region.start, region.end)."""
        out = np.full(len(region), np.nan, dtype=np.float64)
        iv = self._by_chrom.get(region.chrom)
        if iv is None or len(region) == 0:
            return out

        for i in iv.overlapping(region.start, region.end):
            lo = max(int(iv.starts[i]), region.start)
            hi = min(int(iv.ends[i]), region.end)
            out[lo - region.start : hi - region.start] = iv.values[i]
        return out


class _ChromIntervals:
    """One chromosome's intervals, sorted by start."""

    def __init__(self, starts: np.ndarray, ends: np.ndarray, values: np.ndarray, line: np.ndarray):
        self.starts = starts
        self.ends = ends
        self.values = values
        self.line = line
        # reach[k] = max(ends[:k+1]); non-decreasing, so it can be bisected
        self.reach = np.maximum.accumulate(ends)

    @classmethod
    def from_frame(cls, grp: pd.DataFrame) -> "_ChromIntervals":
        starts = grp["start"].to_numpy(dtype=np.int64)
        order = np.argsort(starts, kind="stable")
        return cls(
            starts=starts[order],
            ends=grp["end"].to_numpy(dtype=np.int64)[order],
            values=grp["value"].to_numpy(dtype=np.float64)[order],
            line=np.arange(len(grp))[order],
        )

    def overlapping(self, start: int, end: int) -> np.ndarray:
        """
        Indices of intervals overlapping [start, end), in file order so that
        later lines are applied last.
        """
        # before `lo` every interval ends at or before `start`;
        # from `hi` on every interval starts at or after `end`
        lo = int(np.searchsorted(self.reach, start, side="right"))
        hi = int(np.searchsorted(self.starts, end, side="left"))
        if lo >= hi:
            return np.empty(0, dtype=np.intp)

        idx = np.arange(lo, hi)
        idx = idx[(self.ends[idx] > start) & (self.ends[idx] > self.starts[idx])]
        return idx[np.argsort(self.line[idx], kind="stable")]


@contextmanager
def open_output(path: Optional[PathLike]) -> Iterator[TextIO]:
    """
    Open the output sink for writing. '-' or None means stdout (left open).

    Parent directories are created as needed.
    """
    if path is None or str(path) == "-":
        yield sys.stdout
        return

    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        f = p.open("w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise TrackIOError(f"Could not open output file {p} for writing: {exc}") from exc
    try:
        yield f
    finally:
        f.close()
