from math import factorial, log2

import pytest

from quicksorts import generate_statistics as gs
from quicksorts.impl.quick3 import algorithm as quick3
from quicksorts.impl.stable_quick import algorithm as stable_quick
from quicksorts.SortingAlgorithm import SortingAlgorithm


def test_exhaustive_operation_cnts():
    cnts = gs.get_operation_cnts(quick3, 4)
    assert len(cnts) == factorial(4)
    assert all(cnt > 0 for cnt in cnts)
    assert gs.get_operation_cnts(stable_quick, 1) == [0]
    assert gs.get_operation_cnts(stable_quick, 2) == [1, 1]


def test_avg_operation_cnt():
    best, worst, avg = gs.get_avg_operation_cnt(stable_quick, 3)
    assert best <= avg <= worst
    assert best >= 2


def test_sampled_operation_cnts(monkeypatch):
    monkeypatch.setattr(gs, "MAX_SAMPLE_TIME_MS", 0)
    cnts = gs.get_operation_cnts(quick3, quick3.max_N + 20)
    assert len(cnts) >= 1


def test_invalid_algorithm():
    broken = SortingAlgorithm("broken", lambda seq, left, right, cmp: seq.reverse())
    with pytest.raises(gs.InvalidSortingAlgorithmError):
        gs.get_operation_cnts(broken, 3)


def test_generate_statistics():
    df = gs.generate_statistics([2, 3], progress=False)
    assert list(df.columns) == gs.COLUMNS
    assert len(df) == 4
    assert df["name"].tolist() == ["3-way quick sort", "3-way quick sort", "stable quick sort", "stable quick sort"]
    row = df.iloc[1]
    assert row["N"] == 3
    assert row["input"] == "6"
    assert row["lower bound"] == pytest.approx(log2(6))
    assert row["best"] <= row["avg"] <= row["worst"]
    assert row["ratio"] == pytest.approx(row["avg"] / log2(6))


def test_to_displayable_int():
    assert gs.to_displayable_int(120) == "120"
    assert gs.to_displayable_int(factorial(20)) == "2.43e+18"


def test_operation_histogram():
    fig = gs.operation_histogram(stable_quick, 3)
    assert "stable quick sort" in fig.layout.title.text
    assert fig.layout.showlegend is False
