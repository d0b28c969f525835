# tracksax/sax/breakpoints.py
"""
Equiprobable breakpoints of the standard normal distribution.

For alphabet size a, the thresholds are the N(0, 1) quantiles at cumulative
probabilities k/a, k = 1 .. a-1, so z-normalized Gaussian data falls into
each of the a buckets with probability 1/a.

The table is built once at import and exposed read-only.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np
from scipy.stats import norm

from ..errors import InvalidAlphabetSize


MIN_ALPHABET_SIZE = 2
MAX_ALPHABET_SIZE = 20

# bucket 0 -> 'a', bucket 19 -> 't'
SYMBOLS = string.ascii_lowercase[:MAX_ALPHABET_SIZE]


def _build_table() -> Mapping[int, Tuple[float, ...]]:
    table = {}
    for a in range(MIN_ALPHABET_SIZE, MAX_ALPHABET_SIZE + 1):
        probs = np.arange(1, a) / a
        table[a] = tuple(float(q) for q in norm.ppf(probs))
    return MappingProxyType(table)


def _readonly(bp: Tuple[float, ...]) -> np.ndarray:
    arr = np.asarray(bp, dtype=np.float64)
    arr.setflags(write=False)
    return arr


BREAKPOINTS: Mapping[int, Tuple[float, ...]] = _build_table()

_ARRAYS = {a: _readonly(bp) for a, bp in BREAKPOINTS.items()}


def validate_alphabet_size(alphabet_size: int) -> int:
    """Return alphabet_size as int, or raise InvalidAlphabetSize."""
    try:
        is_int = not isinstance(alphabet_size, bool) and int(alphabet_size) == alphabet_size
    except (TypeError, ValueError) as exc:
        raise InvalidAlphabetSize(f"Alphabet size must be an integer, got {alphabet_size!r}") from exc
    if not is_int:
        raise InvalidAlphabetSize(f"Alphabet size must be an integer, got {alphabet_size!r}")
    a = int(alphabet_size)
    if not MIN_ALPHABET_SIZE <= a <= MAX_ALPHABET_SIZE:
        raise InvalidAlphabetSize(
            f"Alphabet size must be in [{MIN_ALPHABET_SIZE}, {MAX_ALPHABET_SIZE}], got {a}"
        )
    return a


def breakpoints(alphabet_size: int) -> np.ndarray:
    """
    Thresholds for one alphabet size.

    Returns:
        read-only array of (alphabet_size - 1) strictly ascending floats
    """
    return _ARRAYS[validate_alphabet_size(alphabet_size)]


def symbol_alphabet(alphabet_size: int) -> str:
    """The alphabet_size symbols in bucket order ('ab', 'abc', ...)."""
    return SYMBOLS[: validate_alphabet_size(alphabet_size)]
