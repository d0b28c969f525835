# tracksax/sax/sweep.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np

from ..data.normalization import NormParams
from ..errors import InvalidRange
from .breakpoints import validate_alphabet_size
from .encoder import prepare, quantize, to_symbols


@dataclass(frozen=True)
class SweepMatrix:
    """
    Symbols for one signal across a range of alphabet sizes.

    symbols: (T, K) array of single characters; column k belongs to
             alphabet_sizes[k], ascending.
    """
    alphabet_sizes: Tuple[int, ...]
    symbols: np.ndarray

    def __len__(self) -> int:
        return self.symbols.shape[0]

    def column(self, alphabet_size: int) -> str:
        """The SAX string for one alphabet size of the sweep."""
        try:
            k = self.alphabet_sizes.index(alphabet_size)
        except ValueError:
            raise KeyError(f"Alphabet size {alphabet_size} not in sweep {self.alphabet_sizes}") from None
        return "".join(self.symbols[:, k].tolist())

    def rows(self) -> Iterator[str]:
        """One string per position: its symbols in ascending alphabet order."""
        for row in self.symbols:
            yield "".join(row.tolist())


def alphabet_range(alpha_start: int, alpha_end: int) -> Tuple[int, ...]:
    """Validated, ascending tuple of alphabet sizes alpha_start..alpha_end."""
    alpha_start = validate_alphabet_size(alpha_start)
    alpha_end = validate_alphabet_size(alpha_end)
    if alpha_start > alpha_end:
        raise InvalidRange(f"Alphabet range start {alpha_start} > end {alpha_end}")
    return tuple(range(alpha_start, alpha_end + 1))


def sweep(
    signal: np.ndarray,
    alpha_start: int,
    alpha_end: int,
    window: int = 0,
    params: Optional[NormParams] = None,
) -> SweepMatrix:
    """
    Encode one signal for every alphabet size in [alpha_start, alpha_end].

    Smoothing and normalization run once; only the breakpoint set changes
    per column. Each column equals encode(signal, a, window, params).
    """
    sizes = alphabet_range(alpha_start, alpha_end)
    z = prepare(signal, window, params)

    symbols = np.empty((z.shape[0], len(sizes)), dtype="<U1")
    for k, a in enumerate(sizes):
        symbols[:, k] = to_symbols(quantize(z, a))

    return SweepMatrix(alphabet_sizes=sizes, symbols=symbols)
