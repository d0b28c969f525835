# tracksax/cli.py
"""
tracksax - SAX symbol conversion of a per-base signal track.

usage:
   tracksax alphabet-size input.bedGraph[:chr:start-end] output.sax

alphabet-size is from 2-20. Output '-' writes to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .data.io import BedGraphTrack, load_regions_bed, open_output
from .data.regions import parse_track_spec
from .errors import SaxError
from .pipeline import SaxRunConfig, iter_region_signals, run_sax
from .utils.config import get_section, load_yaml
from .utils.logging import configure_logging, log_run_header


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tracksax",
        description="Implementation of the SAX algorithm on per-base signal track regions.",
    )
    ap.add_argument("alphabet_size", type=int, help="alphabet size, 2-20")
    ap.add_argument("track", help="input bedGraph, optionally suffixed with :chrom:start-end")
    ap.add_argument("output", help="output file ('-' for stdout)")

    ap.add_argument("--iterate-start", type=int, default=None, metavar="M",
                    help="run SAX with alphabet sizes ranging from M ...")
    ap.add_argument("--iterate-end", type=int, default=None, metavar="N",
                    help="... to N (inclusive)")
    ap.add_argument("--window", type=int, default=None, metavar="W",
                    help="smoothing window size; forced down to a power of 2 (e.g. 16, 32, 1024)")
    ap.add_argument("--force-tabular", action="store_true", default=None,
                    help="tabular (BED4-style) output even for a single alphabet size")
    ap.add_argument("--add-original-value", action="store_true", default=None,
                    help="with tabular output, add a column with the original data")
    ap.add_argument("--mean", type=float, default=None,
                    help="force z-normalization to use a fixed mean (requires --std)")
    ap.add_argument("--std", type=float, default=None,
                    help="force z-normalization to use a fixed standard deviation (requires --mean)")

    ap.add_argument("--regions", type=str, default=None, metavar="BED",
                    help="only process the intervals listed in this BED file")
    ap.add_argument("--config", type=str, default=None, metavar="YAML",
                    help="YAML file with a 'sax' section of default options")
    ap.add_argument("--plot-dir", type=str, default=None,
                    help="save a diagnostic figure per region into this directory")
    ap.add_argument("--log-file", type=str, default=None)
    ap.add_argument("--log-level", type=str, default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def resolve_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge the YAML 'sax' section (if any) with explicit command-line options."""
    opts: Dict[str, Any] = {}
    if args.config:
        opts.update(get_section(load_yaml(args.config), "sax"))

    cli = {
        "iterate_start": args.iterate_start,
        "iterate_end": args.iterate_end,
        "window": args.window,
        "mean": args.mean,
        "std": args.std,
        "force_tabular": args.force_tabular,
        "add_original_value": args.add_original_value,
        "regions": args.regions,
    }
    opts.update({k: v for k, v in cli.items() if v is not None})
    opts["alphabet_size"] = args.alphabet_size
    return opts


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger = configure_logging(
        name="tracksax",
        level=getattr(logging, args.log_level),
        log_file=args.log_file,
    )

    try:
        opts = resolve_options(args)
        regions_bed = opts.pop("regions", None)

        # options are fully validated before the output file is touched
        config = SaxRunConfig.from_mapping(opts).validate()
        track_path, region = parse_track_spec(args.track)

        log_run_header(logger, f"tracksax {__version__}", extra={
            "track": track_path,
            "output": args.output,
            **config.describe(),
        })

        track = BedGraphTrack(track_path)
        if region is not None:
            regions = [region]
        elif regions_bed:
            regions = load_regions_bed(regions_bed)
        else:
            regions = track.regions()
        logger.info(f"Loaded {track!r}; {len(regions)} region(s) to process")

        with open_output(args.output) as sink:
            summary = run_sax(config, iter_region_signals(track, regions), sink, plot_dir=args.plot_dir)
    except SaxError as exc:
        logger.error(str(exc))
        return 1

    logger.info(f"Done: {summary.regions} region(s), {summary.positions} positions, {summary.lines} lines")
    return 0


if __name__ == "__main__":
    sys.exit(main())
