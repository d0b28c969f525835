# tracksax/data/regions.py
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from ..errors import ConfigError


_REGION_RE = re.compile(r"^(?P<chrom>[^:\s]+):(?P<start>[\d,]+)-(?P<end>[\d,]+)$")
_TRACK_SPEC_RE = re.compile(r"^(?P<path>.+?):(?P<region>[^:\s]+:[\d,]+-[\d,]+)$")


@dataclass(frozen=True)
class Region:
    """
    A genomic interval [start, end), 0-based, half-open (BED convention).
    """
    chrom: str
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise ConfigError(f"Region start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ConfigError(f"Region end < start: {self.chrom}:{self.start}-{self.end}")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def label(self) -> str:
        return f"{self.chrom}:{self.start}-{self.end}"


def parse_region(text: str) -> Region:
    """Parse 'chrom:start-end' (commas allowed in coordinates)."""
    m = _REGION_RE.match(text.strip())
    if not m:
        raise ConfigError(f"Malformed region {text!r}; expected chrom:start-end")
    start = int(m.group("start").replace(",", ""))
    end = int(m.group("end").replace(",", ""))
    return Region(m.group("chrom"), start, end)


def parse_track_spec(spec: str) -> Tuple[Path, Optional[Region]]:
    """
    Split 'track.bedGraph[:chrom:start-end]' into a path and optional region.

    The region suffix is only recognized when it is well formed, so paths
    containing ':' still work when no region is given.
    """
    m = _TRACK_SPEC_RE.match(spec)
    if m:
        return Path(m.group("path")), parse_region(m.group("region"))
    return Path(spec), None
