# tracksax/__init__.py
"""
tracksax: SAX (Symbolic Aggregate approXimation) of per-base signal tracks.

Subpackages:
- data: regions, track/BED readers, windowing, normalization
- sax: breakpoint table, encoder, alphabet sweep
- output: FASTA-like and tabular renderings
- plotting: diagnostic figures
- utils: logging, YAML config, paths
"""

__version__ = "0.1.0"

from .errors import (
    ConfigError,
    DataInconsistency,
    InvalidAlphabetSize,
    InvalidParams,
    InvalidRange,
    SaxError,
    TrackIOError,
)
from .data import NormParams, Region
from .sax import breakpoints, encode, sweep

__all__ = [
    "__version__",
    "ConfigError",
    "DataInconsistency",
    "InvalidAlphabetSize",
    "InvalidParams",
    "InvalidRange",
    "SaxError",
    "TrackIOError",
    "NormParams",
    "Region",
    "breakpoints",
    "encode",
    "sweep",
]
