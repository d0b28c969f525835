import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def ramp():
    """Signal 1..8; population mean 4.5, population std sqrt(5.25)."""
    return np.arange(1, 9, dtype=float)


@pytest.fixture
def bedgraph(tmp_path):
    """bedGraph with per-base values 1..8 on chr1:0-8 and a short chr2."""
    lines = ["track type=bedGraph name=test"]
    lines += [f"chr1\t{i}\t{i + 1}\t{i + 1}" for i in range(8)]
    lines += ["chr2\t10\t12\t5.0", "chr2\t12\t14\t7.0"]
    p = tmp_path / "signal.bedGraph"
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p
