# tracksax/errors.py
"""
Exception hierarchy for tracksax.

Everything raised on purpose derives from SaxError so the CLI can report it
and exit with status 1. The concrete classes also inherit from the closest
built-in (ValueError, RuntimeError, OSError) so library callers can catch
them the usual way.
"""

from __future__ import annotations


class SaxError(Exception):
    """Base class for all tracksax errors."""


class ConfigError(SaxError, ValueError):
    """Invalid run options (alphabet size, range, normalization, window)."""


class InvalidAlphabetSize(ConfigError):
    """Alphabet size outside the supported breakpoint table."""


class InvalidRange(ConfigError):
    """Alphabet sweep range with start > end."""


class InvalidParams(ConfigError):
    """Normalization parameters that cannot be used (mean xor std, std <= 0)."""


class DataInconsistency(SaxError, RuntimeError):
    """Internal mismatch between computed symbol rows and original values."""


class TrackIOError(SaxError, OSError):
    """Track, region list, or output file could not be read or written."""
