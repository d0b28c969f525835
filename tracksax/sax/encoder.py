# tracksax/sax/encoder.py
from __future__ import annotations

from typing import Optional

import numpy as np

from ..data.normalization import NormParams, normalize, resolve_params
from ..data.windowing import smooth_windows
from .breakpoints import SYMBOLS, breakpoints, validate_alphabet_size


# positions with no data (NaN after smoothing) fall outside every alphabet
MISSING_SYMBOL = "N"


def prepare(
    signal: np.ndarray,
    window: int = 0,
    params: Optional[NormParams] = None,
) -> np.ndarray:
    """
    Smooth, then z-normalize a signal.

    With params=None the mean/std are population statistics of the
    *smoothed* series, computed once for the whole series.

    Args:
        signal: (T,) raw per-base values
        window: smoothing window (already coerced); 0 disables smoothing
        params: fixed normalization, or None to derive from data

    Returns:
        z: (T,) float64; NaN where no data is available
    """
    smoothed = smooth_windows(signal, window)
    if smoothed.size == 0:
        return smoothed
    return normalize(smoothed, resolve_params(smoothed, params))


def quantize(z: np.ndarray, alphabet_size: int) -> np.ndarray:
    """
    Bucket index per value: the number of breakpoints strictly exceeded.

    Monotone: z[i] <= z[j] implies bucket[i] <= bucket[j].
    NaN values get bucket -1.
    """
    z = np.asarray(z, dtype=np.float64)
    buckets = np.searchsorted(breakpoints(alphabet_size), z, side="left").astype(np.int64)
    buckets[np.isnan(z)] = -1
    return buckets


def to_symbols(buckets: np.ndarray, missing: str = MISSING_SYMBOL) -> np.ndarray:
    """Map bucket indices to single-character symbols (-1 -> `missing`)."""
    table = np.array(list(SYMBOLS) + [missing])
    return table[np.asarray(buckets, dtype=np.int64)]


def encode(
    signal: np.ndarray,
    alphabet_size: int,
    window: int = 0,
    params: Optional[NormParams] = None,
) -> str:
    """
    SAX string for one alphabet size; len(result) == len(signal).

    Deterministic: the same inputs always give the same string.
    """
    alphabet_size = validate_alphabet_size(alphabet_size)
    z = prepare(signal, window, params)
    return "".join(to_symbols(quantize(z, alphabet_size)).tolist())
