from __future__ import annotations

import numpy as np
import pytest

from har_tidy.data_processing.errors import MalformedRow
from har_tidy.data_processing.parsing import parse_int_column, parse_name_table, parse_numeric_matrix


def test_parse_numeric_matrix_runs_of_whitespace():
    lines = ["2.5717778e-001 -2.3285230e-002", "1   -1e+000", "0.5\t0.25"]
    out = parse_numeric_matrix(lines, 2)
    assert out.dtype == np.float64
    assert out.shape == (3, 2)
    np.testing.assert_allclose(out, [[0.25717778, -0.02328523], [1.0, -1.0], [0.5, 0.25]])


def test_parse_numeric_matrix_short_row_is_rejected():
    good = " ".join(["0.1"] * 561)
    short = " ".join(["0.1"] * 560)
    with pytest.raises(MalformedRow) as ei:
        parse_numeric_matrix([good, short, good], 561, source="test/X_test.txt")
    assert ei.value.line_no == 2
    assert ei.value.source == "test/X_test.txt"
    assert "560" in str(ei.value)


def test_parse_numeric_matrix_rejects_non_numeric():
    with pytest.raises(MalformedRow) as ei:
        parse_numeric_matrix(["1 2", "3 x"], 2)
    assert ei.value.line_no == 2


def test_parse_numeric_matrix_checks_every_line_before_returning():
    # The bad row is last; nothing is returned for the good prefix.
    lines = ["1 2"] * 50 + ["1"]
    with pytest.raises(MalformedRow) as ei:
        parse_numeric_matrix(lines, 2)
    assert ei.value.line_no == 51


def test_parse_numeric_matrix_empty_input():
    assert parse_numeric_matrix([], 3).shape == (0, 3)


def test_parse_int_column():
    assert parse_int_column(["1", " 30 ", "7"]).tolist() == [1, 30, 7]
    with pytest.raises(MalformedRow):
        parse_int_column(["1", "2.5"])
    with pytest.raises(MalformedRow):
        parse_int_column(["1 2"])


def test_parse_name_table():
    assert parse_name_table(["1 tBodyAcc-mean()-X", "2 tBodyAcc-std()-Y"]) == [
        "tBodyAcc-mean()-X",
        "tBodyAcc-std()-Y",
    ]
    with pytest.raises(MalformedRow):
        parse_name_table(["1 a", "2"])


def test_digit_grouping_underscores_are_not_numbers():
    with pytest.raises(MalformedRow):
        parse_numeric_matrix(["1_0 2"], 2)
    with pytest.raises(MalformedRow):
        parse_numeric_matrix(["1 2.5_5"], 2)
    with pytest.raises(MalformedRow):
        parse_int_column(["1_0"])
