# tracksax/utils/paths.py
from __future__ import annotations

from pathlib import Path
from typing import Union


PathLike = Union[str, Path]


def as_path(p: PathLike) -> Path:
    """Normalize to a pathlib.Path."""
    return p if isinstance(p, Path) else Path(p)


def ensure_dir(path: PathLike) -> Path:
    """Create a directory (parents ok). Returns the Path."""
    p = as_path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def region_filename(label: str) -> str:
    """Filesystem-safe stem for a region label: 'chr1:0-100' -> 'chr1_0-100'."""
    return label.replace(":", "_").replace("/", "_")
