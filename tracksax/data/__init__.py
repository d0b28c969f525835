# tracksax/data/__init__.py
"""
Data subpackage for tracksax.

Shape conventions:
    * Signals are 1-D float64 arrays, one value per base, NaN = no data.
    * Regions are 0-based, half-open [start, end).

Separation of concerns:
    * regions.py       -> Region type and 'chrom:start-end' parsing
    * io.py            -> bedGraph / BED readers and the output sink
    * windowing.py     -> fixed-window smoothing and window-size coercion
    * normalization.py -> z-normalization parameters (fixed or fitted)
"""

from .regions import Region, parse_region, parse_track_spec
from .io import BedGraphTrack, TrackSource, load_regions_bed, open_output, read_bed_columns
from .windowing import force_window_size, smooth_windows
from .normalization import NormParams, fit_params, normalize, resolve_params

__all__ = [
    # regions
    "Region",
    "parse_region",
    "parse_track_spec",
    # io
    "BedGraphTrack",
    "TrackSource",
    "load_regions_bed",
    "open_output",
    "read_bed_columns",
    # windowing
    "force_window_size",
    "smooth_windows",
    # normalization
    "NormParams",
    "fit_params",
    "normalize",
    "resolve_params",
]
