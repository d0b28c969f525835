# tracksax/pipeline.py
"""
Run orchestration: options -> per-region encoding -> rendered lines.

Regions are processed one at a time, in input order. Data-derived
normalization statistics are computed per region, so no state crosses
region boundaries.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, TextIO, Tuple, Union

import numpy as np

from .data.io import TrackSource
from .data.normalization import NormParams
from .data.regions import Region
from .data.windowing import force_window_size
from .errors import ConfigError, DataInconsistency
from .output.render import SEQUENTIAL, choose_mode, header_line, render_sequential, render_tabular, write_lines
from .sax.encoder import encode
from .sax.sweep import alphabet_range, sweep
from .utils.logging import get_logger
from .utils.paths import ensure_dir, region_filename


PathLike = Union[str, Path]

DEFAULT_ALPHABET_SIZE = 8

logger = get_logger("tracksax.pipeline")


@dataclass(frozen=True)
class SaxRunConfig:
    """
    Resolved options for one run.

    iterate_start / iterate_end default to alphabet_size, so a run without
    them encodes a single alphabet size.
    """
    alphabet_size: int = DEFAULT_ALPHABET_SIZE
    iterate_start: Optional[int] = None
    iterate_end: Optional[int] = None
    window: int = 0
    mean: Optional[float] = None
    std: Optional[float] = None
    force_tabular: bool = False
    add_original_value: bool = False
    validated: bool = dataclasses.field(default=False, repr=False, compare=False)

    @classmethod
    def from_mapping(cls, d: Dict[str, Any]) -> "SaxRunConfig":
        """
        Build from a config mapping (e.g. the 'sax' section of a YAML file).

        Values are type-checked here; anything that is not a number (or a
        boolean for the flags) raises ConfigError.
        """
        unknown = sorted(set(d) - set(_OPTION_TYPES))
        if unknown:
            raise ConfigError(f"Unknown sax config keys: {', '.join(unknown)}")

        kwargs: Dict[str, Any] = {}
        for key, value in d.items():
            kind = _OPTION_TYPES[key]
            if value is None and key in _OPTIONAL_KEYS:
                kwargs[key] = None
            elif kind is bool:
                if not isinstance(value, bool):
                    raise ConfigError(f"sax.{key} must be true or false, got {value!r}")
                kwargs[key] = value
            else:
                kwargs[key] = _to_number(key, value, kind)
        return cls(**kwargs)

    @property
    def alphabet_bounds(self) -> Tuple[int, int]:
        """
        Alphabet sizes actually encoded: the positional size in sequential
        mode, the iterate range in tabular mode.
        """
        if self.mode == SEQUENTIAL:
            return self.alphabet_size, self.alphabet_size
        return self.alpha_start, self.alpha_end

    @property
    def alpha_start(self) -> int:
        return self.alphabet_size if self.iterate_start is None else self.iterate_start

    @property
    def alpha_end(self) -> int:
        return self.alphabet_size if self.iterate_end is None else self.iterate_end

    @property
    def mode(self) -> str:
        return choose_mode(self.alpha_start, self.alpha_end, self.force_tabular)

    @property
    def norm_params(self) -> Optional[NormParams]:
        return NormParams.from_options(self.mean, self.std)

    def validate(self) -> "SaxRunConfig":
        """
        Check every option and return a copy with the window coerced.

        Raises ConfigError (or a subclass) on the first invalid option.
        An already validated config is returned unchanged.
        """
        if self.validated:
            return self

        alphabet_range(self.alphabet_size, self.alphabet_size)
        alphabet_range(self.alpha_start, self.alpha_end)
        NormParams.from_options(self.mean, self.std)

        window = force_window_size(self.window)
        if window != self.window:
            logger.warning(f"Window size {self.window} forced to {window} (nearest lower power of 2)")
        return dataclasses.replace(self, window=window, validated=True)

    def describe(self) -> Dict[str, Any]:
        d = dataclasses.asdict(self)
        d.pop("validated")
        d["mode"] = self.mode
        return d


_OPTION_TYPES: Dict[str, type] = {
    "alphabet_size": int,
    "iterate_start": int,
    "iterate_end": int,
    "window": int,
    "mean": float,
    "std": float,
    "force_tabular": bool,
    "add_original_value": bool,
}
_OPTIONAL_KEYS = {"iterate_start", "iterate_end", "mean", "std"}


def _to_number(key: str, value: Any, kind: type) -> Any:
    if isinstance(value, bool):
        raise ConfigError(f"sax.{key} must be a number, got {value!r}")
    try:
        number = kind(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"sax.{key} must be {'an integer' if kind is int else 'a number'}, got {value!r}") from exc
    if kind is int and number != value:
        raise ConfigError(f"sax.{key} must be an integer, got {value!r}")
    return number


@dataclass
class RunSummary:
    regions: int = 0
    positions: int = 0
    lines: int = 0


def iter_region_signals(
    track: TrackSource,
    regions: Optional[Sequence[Region]] = None,
) -> Iterator[Tuple[Region, np.ndarray]]:
    """Yield (region, values) for each region (default: all of the track's), in order."""
    if regions is None:
        regions = track.regions()
    for region in regions:
        yield region, track.values(region)


def render_region(region: Region, values: np.ndarray, config: SaxRunConfig) -> Iterator[str]:
    """
    Output lines for one region. Encoding completes before the first line
    is yielded, so a failing region writes nothing.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.shape[0] != len(region):
        raise DataInconsistency(
            f"{region.label}: expected {len(region)} values, track returned {values.shape[0]}"
        )

    params = config.norm_params
    alpha_start, alpha_end = config.alphabet_bounds
    if config.mode == SEQUENTIAL:
        sax = encode(values, alpha_start, config.window, params)
        return render_sequential(region, sax)

    matrix = sweep(values, alpha_start, alpha_end, config.window, params)
    original = values if config.add_original_value else None
    return render_tabular(region, matrix, original)


def run_sax(
    config: SaxRunConfig,
    region_signals: Iterable[Tuple[Region, np.ndarray]],
    sink: TextIO,
    plot_dir: Optional[PathLike] = None,
) -> RunSummary:
    """
    Encode and write every region to `sink`.

    `config` is validated here unless the caller already did so.

    The '#' header line precedes the first region's output and is omitted
    when there are no regions. The first error aborts the run.
    """
    config = config.validate()
    summary = RunSummary()

    if config.add_original_value and config.mode == SEQUENTIAL:
        logger.warning("add_original_value only applies to tabular output; ignored")

    if plot_dir is not None:
        # local import keeps matplotlib off the plain encoding path
        from .plotting import plot_sax
        plot_dir = ensure_dir(plot_dir)

    alpha_start, alpha_end = config.alphabet_bounds
    for region, values in region_signals:
        lines = render_region(region, values, config)
        if summary.regions == 0:
            summary.lines += write_lines(sink, [header_line(config.mode, alpha_start, alpha_end)])

        n = write_lines(sink, lines)
        summary.regions += 1
        summary.positions += len(region)
        summary.lines += n
        logger.info(f"{region.label}: {len(region)} positions, {n} lines")

        if plot_dir is not None:
            plot_sax(
                values,
                alpha_start,
                window=config.window,
                params=config.norm_params,
                start=region.start,
                title=region.label,
                outpath_no_ext=Path(plot_dir) / region_filename(region.label),
            )

    return summary
