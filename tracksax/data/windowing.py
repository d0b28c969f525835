# tracksax/data/windowing.py
from __future__ import annotations

import numpy as np

from ..errors import ConfigError


def force_window_size(window: int) -> int:
    """
    Coerce a requested smoothing window to a usable size.

    Rule:
        - 0 disables smoothing and is returned as-is.
        - any positive value is rounded DOWN to the nearest power of two
          (e.g. 1000 -> 512, 16 -> 16, 3 -> 2, 1 -> 1).

    Raises:
        ConfigError for negative or non-integer values.
    """
    try:
        is_int = not isinstance(window, bool) and int(window) == window
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Window size must be an integer, got {window!r}") from exc
    if not is_int:
        raise ConfigError(f"Window size must be an integer, got {window!r}")
    window = int(window)
    if window < 0:
        raise ConfigError(f"Window size must be >= 0, got {window}")
    if window == 0:
        return 0
    return 1 << (window.bit_length() - 1)


def smooth_windows(x: np.ndarray, window: int) -> np.ndarray:
    """
    Replace each value with the mean of its non-overlapping window.

    Positions i and j share a window iff i // window == j // window. Output
    length equals input length (smoothing, not dimensionality reduction). The
    final window may be shorter than `window` and is averaged over the
    positions it actually has.

    Args:
        x: array of shape (T,)
        window: window size; 0 returns an unchanged copy

    Returns:
        smoothed: array of shape (T,), float64

    Notes:
        - NaN values are ignored inside a window mean.
        - A window with no finite values stays NaN.
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError(f"Expected x with shape (T,), got {x.shape}")
    if window < 0:
        raise ConfigError(f"Window size must be >= 0, got {window}")

    if window == 0 or x.size == 0:
        return x.copy()

    n = x.shape[0]
    n_groups = -(-n // window)
    pad = n_groups * window - n

    # pad with NaN so the short tail window averages over its real positions
    padded = np.concatenate([x, np.full(pad, np.nan)]).reshape(n_groups, window)
    finite = np.isfinite(padded)
    counts = finite.sum(axis=1)
    sums = np.where(finite, padded, 0.0).sum(axis=1)

    means = np.full(n_groups, np.nan)
    np.divide(sums, counts, out=means, where=counts > 0)

    return np.repeat(means, window)[:n]
