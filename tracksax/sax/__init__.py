# tracksax/sax/__init__.py
"""
SAX transform: breakpoint table, single-alphabet encoder, alphabet sweep.
"""

from .breakpoints import (
    BREAKPOINTS,
    MAX_ALPHABET_SIZE,
    MIN_ALPHABET_SIZE,
    SYMBOLS,
    breakpoints,
    symbol_alphabet,
    validate_alphabet_size,
)
from .encoder import MISSING_SYMBOL, encode, prepare, quantize, to_symbols
from .sweep import SweepMatrix, alphabet_range, sweep

__all__ = [
    "BREAKPOINTS",
    "MAX_ALPHABET_SIZE",
    "MIN_ALPHABET_SIZE",
    "SYMBOLS",
    "breakpoints",
    "symbol_alphabet",
    "validate_alphabet_size",
    "MISSING_SYMBOL",
    "encode",
    "prepare",
    "quantize",
    "to_symbols",
    "SweepMatrix",
    "alphabet_range",
    "sweep",
]
