from __future__ import annotations

import pytest

from har_tidy.data_processing.errors import MalformedRow
from har_tidy.data_processing.lines import line_source_from_mapping
from har_tidy.data_processing.pipeline import run_pipeline
from har_tidy.data_processing.schemas import HAR_LAYOUT


def test_pipeline_hands_both_tables_to_sink(toy_source):
    received = {}
    result = run_pipeline(toy_source, sink=lambda name, df: received.__setitem__(name, df), n_features=2)

    assert set(received) == {"tidy", "average"}
    assert received["tidy"] is result.tidy
    assert len(result.tidy) == 3
    assert len(result.average) == 2
    assert {"assemble", "average", "persist"} <= set(result.timings)


def test_pipeline_failure_reaches_no_sink(toy_lines):
    toy_lines[HAR_LAYOUT.test.features] = ["1 3 5"]
    received = []
    with pytest.raises(MalformedRow):
        run_pipeline(line_source_from_mapping(toy_lines), sink=lambda name, df: received.append(name), n_features=2)
    assert received == []
