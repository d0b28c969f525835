import pytest

from tracksax.cli import build_parser, main, resolve_options


def test_single_alphabet_fasta(bedgraph, tmp_path):
    out = tmp_path / "out.sax"
    assert main(["4", f"{bedgraph}:chr1:0-8", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "# alphabet size = 4\n>chr1:0-8\naabbccdd\n"


def test_region_suffix_restricts_input(bedgraph, tmp_path):
    out = tmp_path / "out.sax"
    assert main(["4", f"{bedgraph}:chr1:2-6", str(out)]) == 0
    assert out.read_text(encoding="utf-8").splitlines()[1:] == [">chr1:2-6", "abcd"]


def test_whole_track_processes_every_chromosome(bedgraph, tmp_path):
    out = tmp_path / "out.sax"
    assert main(["2", str(bedgraph), str(out)]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# alphabet size = 2"
    assert [ln for ln in lines if ln.startswith(">")] == [">chr1:0-8", ">chr2:10-14"]
    assert lines[-1] == "aabb"


def test_sweep_with_original_value(bedgraph, tmp_path):
    out = tmp_path / "out.bed"
    rc = main(["4", f"{bedgraph}:chr1:0-8", str(out),
               "--iterate-start=2", "--iterate-end=4", "--add-original-value"])
    assert rc == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# alphabet size = 2-4"
    assert len(lines) == 9
    chrom, start, end, symbols, value = lines[1].split("\t")
    assert (chrom, start, end, value) == ("chr1", "0", "1", "1.0000")
    assert all(len(ln.split("\t")[3]) == 3 for ln in lines[1:])


def test_regions_bed_option(bedgraph, tmp_path):
    regions = tmp_path / "regions.bed"
    regions.write_text("chr1\t4\t8\nchr1\t0\t4\n", encoding="utf-8")
    out = tmp_path / "out.sax"
    assert main(["2", str(bedgraph), str(out), "--regions", str(regions)]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert [ln for ln in lines if ln.startswith(">")] == [">chr1:4-8", ">chr1:0-4"]


@pytest.mark.parametrize("extra", [
    ["--mean=1"],
    ["--std=1"],
    ["--mean=1", "--std=0"],
    ["--iterate-start=5", "--iterate-end=3"],
])
def test_config_errors_abort_before_output_is_created(bedgraph, tmp_path, extra):
    out = tmp_path / "out.sax"
    assert main(["4", str(bedgraph), str(out)] + extra) == 1
    assert not out.exists()


def test_alphabet_size_out_of_range(bedgraph, tmp_path):
    out = tmp_path / "out.sax"
    assert main(["21", str(bedgraph), str(out)]) == 1
    assert not out.exists()


def test_missing_track_fails(tmp_path):
    assert main(["4", str(tmp_path / "missing.bedGraph"), str(tmp_path / "o.sax")]) == 1


def test_yaml_config_supplies_defaults(bedgraph, tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("sax:\n  iterate_start: 2\n  iterate_end: 3\n  window: 3\n", encoding="utf-8")
    args = build_parser().parse_args(["3", str(bedgraph), "-", "--config", str(cfg), "--window", "4"])
    opts = resolve_options(args)
    assert opts == {"alphabet_size": 3, "iterate_start": 2, "iterate_end": 3, "window": 4}


def test_yaml_config_run(bedgraph, tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("sax:\n  force_tabular: true\n  mean: 0\n  std: 1\n", encoding="utf-8")
    out = tmp_path / "out.bed"
    assert main(["2", f"{bedgraph}:chr2:10-14", str(out), "--config", str(cfg)]) == 0
    assert out.read_text(encoding="utf-8").splitlines()[1:] == [
        "chr2\t10\t11\tb", "chr2\t11\t12\tb", "chr2\t12\t13\tb", "chr2\t13\t14\tb",
    ]


def test_stdout_output(bedgraph, capsys):
    assert main(["4", f"{bedgraph}:chr1:0-8", "-"]) == 0
    assert capsys.readouterr().out == "# alphabet size = 4\n>chr1:0-8\naabbccdd\n"


@pytest.mark.parametrize("body", [
    "sax:\n  window: abc\n",
    "sax:\n  window: null\n",
    "sax:\n  mean: x\n  std: 1\n",
])
def test_bad_yaml_values_are_config_errors(bedgraph, tmp_path, body):
    cfg = tmp_path / "run.yaml"
    cfg.write_text(body, encoding="utf-8")
    out = tmp_path / "out.sax"
    assert main(["4", str(bedgraph), str(out), "--config", str(cfg)]) == 1
    assert not out.exists()


def test_force_tabular_header_keeps_range(bedgraph, tmp_path):
    out = tmp_path / "out.bed"
    assert main(["4", f"{bedgraph}:chr1:0-8", str(out), "--force-tabular"]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "# alphabet size = 4-4"
    assert lines[1] == "chr1\t0\t1\ta"


def test_equal_iterate_bounds_use_positional_alphabet(bedgraph, tmp_path):
    out = tmp_path / "out.sax"
    assert main(["4", f"{bedgraph}:chr1:0-8", str(out), "--iterate-start=6", "--iterate-end=6"]) == 0
    assert out.read_text(encoding="utf-8") == "# alphabet size = 4\n>chr1:0-8\naabbccdd\n"
