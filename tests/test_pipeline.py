import io

import numpy as np
import pytest

from tracksax.data.regions import Region
from tracksax.errors import ConfigError, DataInconsistency, InvalidParams, InvalidRange
from tracksax.output.render import SEQUENTIAL, TABULAR
from tracksax.pipeline import SaxRunConfig, iter_region_signals, render_region, run_sax


class ListTrack:
    def __init__(self, data):
        self._data = data

    def regions(self):
        return list(self._data)

    def values(self, region):
        return self._data[region]


def _run(config, pairs):
    buf = io.StringIO()
    summary = run_sax(config, pairs, buf)
    return buf.getvalue(), summary


def test_config_defaults_single_alphabet():
    cfg = SaxRunConfig(alphabet_size=5)
    assert (cfg.alpha_start, cfg.alpha_end) == (5, 5)
    assert cfg.mode == SEQUENTIAL
    assert cfg.norm_params is None


def test_config_range_is_tabular():
    cfg = SaxRunConfig(alphabet_size=5, iterate_start=2)
    assert (cfg.alpha_start, cfg.alpha_end) == (2, 5)
    assert cfg.mode == TABULAR


@pytest.mark.parametrize("kwargs, exc", [
    ({"alphabet_size": 1}, ConfigError),
    ({"alphabet_size": 21}, ConfigError),
    ({"iterate_start": 6, "iterate_end": 3}, InvalidRange),
    ({"mean": 1.0}, InvalidParams),
    ({"std": 1.0}, InvalidParams),
    ({"mean": 1.0, "std": 0.0}, InvalidParams),
    ({"window": -4}, ConfigError),
])
def test_config_validation(kwargs, exc):
    with pytest.raises(exc):
        SaxRunConfig(**kwargs).validate()


def test_validate_coerces_window():
    assert SaxRunConfig(window=100).validate().window == 64


def test_from_mapping_rejects_unknown_keys():
    with pytest.raises(ConfigError):
        SaxRunConfig.from_mapping({"alphabet_size": 4, "windw": 8})


@pytest.mark.parametrize("mapping", [
    {"window": "abc"},
    {"window": None},
    {"window": 2.5},
    {"alphabet_size": "four"},
    {"mean": "x", "std": 1},
    {"force_tabular": "yes"},
    {"add_original_value": 1},
])
def test_from_mapping_rejects_bad_types(mapping):
    with pytest.raises(ConfigError):
        SaxRunConfig.from_mapping(mapping)


def test_from_mapping_accepts_yaml_scalars():
    cfg = SaxRunConfig.from_mapping(
        {"alphabet_size": 4, "window": 8.0, "mean": 0, "std": "1.5", "iterate_start": None, "force_tabular": True}
    )
    assert (cfg.alphabet_size, cfg.window, cfg.mean, cfg.std) == (4, 8, 0.0, 1.5)
    assert cfg.iterate_start is None and cfg.force_tabular is True


def test_validate_runs_once():
    cfg = SaxRunConfig(window=100).validate()
    assert cfg.validated
    assert cfg.validate() is cfg
    assert cfg == SaxRunConfig(window=64)
    assert "validated" not in cfg.describe()


def test_run_sax_keeps_prevalidated_config(ramp):
    cfg = SaxRunConfig(alphabet_size=4, window=3).validate()
    out, _ = _run(cfg, [(Region("chr1", 0, 8), ramp)])
    assert cfg.window == 2
    assert out.splitlines()[2] == "aabbccdd"


def test_sequential_output(ramp):
    out, summary = _run(SaxRunConfig(alphabet_size=4), [(Region("chr1", 0, 8), ramp)])
    assert out == "# alphabet size = 4\n>chr1:0-8\naabbccdd\n"
    assert (summary.regions, summary.positions, summary.lines) == (1, 8, 3)


def test_tabular_output_with_original_values():
    cfg = SaxRunConfig(alphabet_size=4, iterate_start=2, add_original_value=True)
    out, _ = _run(cfg, [(Region("chr1", 100, 103), np.array([1.0, 2.0, 4.0]))])
    assert out.splitlines() == [
        "# alphabet size = 2-4",
        "chr1\t100\t101\taaa\t1.0000",
        "chr1\t101\t102\tabb\t2.0000",
        "chr1\t102\t103\tbcd\t4.0000",
    ]


def test_force_tabular_single_alphabet(ramp):
    out, _ = _run(SaxRunConfig(alphabet_size=4, force_tabular=True), [(Region("c", 0, 8), ramp)])
    lines = out.splitlines()
    assert lines[0] == "# alphabet size = 4-4"
    assert [ln.split("\t")[3] for ln in lines[1:]] == list("aabbccdd")


def test_single_iterate_size_encodes_positional_alphabet(ramp):
    cfg = SaxRunConfig(alphabet_size=4, iterate_start=6, iterate_end=6)
    assert cfg.mode == SEQUENTIAL
    assert cfg.alphabet_bounds == (4, 4)
    out, _ = _run(cfg, [(Region("chr1", 0, 8), ramp)])
    assert out == "# alphabet size = 4\n>chr1:0-8\naabbccdd\n"


def test_tabular_original_value_is_pre_smoothing():
    cfg = SaxRunConfig(alphabet_size=4, iterate_start=2, window=2, add_original_value=True)
    out, _ = _run(cfg, [(Region("chr1", 0, 4), np.array([1.0, 2.0, 4.0, 8.0]))])
    # smoothed pairs 1.5, 1.5, 6, 6 z-normalize to -1, -1, 1, 1
    assert out.splitlines() == [
        "# alphabet size = 2-4",
        "chr1\t0\t1\taaa\t1.0000",
        "chr1\t1\t2\taaa\t2.0000",
        "chr1\t2\t3\tbcd\t4.0000",
        "chr1\t3\t4\tbcd\t8.0000",
    ]


def test_header_written_once_before_first_region(ramp):
    pairs = [(Region("chr1", 0, 8), ramp), (Region("chr2", 0, 8), ramp[::-1].copy())]
    out, summary = _run(SaxRunConfig(alphabet_size=4), pairs)
    assert out.count("#") == 1
    assert out.splitlines() == [
        "# alphabet size = 4", ">chr1:0-8", "aabbccdd", ">chr2:0-8", "ddccbbaa",
    ]
    assert summary.regions == 2


def test_no_regions_no_output():
    out, summary = _run(SaxRunConfig(alphabet_size=4), [])
    assert out == ""
    assert summary.regions == 0


def test_statistics_are_per_region(ramp):
    shifted = ramp + 1000.0
    pairs = [(Region("a", 0, 8), ramp), (Region("b", 0, 8), shifted)]
    out, _ = _run(SaxRunConfig(alphabet_size=4), pairs)
    assert out.splitlines()[2] == out.splitlines()[4] == "aabbccdd"


def test_fixed_params_shared_across_regions(ramp):
    cfg = SaxRunConfig(alphabet_size=2, mean=4.5, std=1.0)
    pairs = [(Region("a", 0, 8), ramp), (Region("b", 0, 8), ramp + 100.0)]
    out, _ = _run(cfg, pairs)
    assert out.splitlines()[2] == "aaaabbbb"
    assert out.splitlines()[4] == "bbbbbbbb"


def test_failing_region_writes_nothing():
    buf = io.StringIO()
    with pytest.raises(InvalidParams):
        run_sax(SaxRunConfig(alphabet_size=4), [(Region("c", 0, 4), np.ones(4))], buf)
    assert buf.getvalue() == ""


def test_value_count_must_match_region(ramp):
    with pytest.raises(DataInconsistency):
        render_region(Region("c", 0, 5), ramp, SaxRunConfig(alphabet_size=4))


def test_iter_region_signals_defaults_to_track_regions(ramp):
    r = Region("chr1", 0, 8)
    track = ListTrack({r: ramp})
    pairs = list(iter_region_signals(track))
    assert pairs[0][0] == r
    np.testing.assert_array_equal(pairs[0][1], ramp)


def test_plot_dir_writes_figures(tmp_path, ramp):
    buf = io.StringIO()
    run_sax(SaxRunConfig(alphabet_size=4, window=2), [(Region("chr1", 0, 8), ramp)], buf,
            plot_dir=tmp_path / "figs")
    assert (tmp_path / "figs" / "chr1_0-8.pdf").is_file()
    assert (tmp_path / "figs" / "chr1_0-8.svg").is_file()
