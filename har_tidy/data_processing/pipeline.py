from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import pandas as pd

from har_tidy.data_processing.assemble import assemble_tidy
from har_tidy.data_processing.averaging import average_by_subject_activity
from har_tidy.data_processing.lines import LineSource
from har_tidy.data_processing.schemas import HAR_LAYOUT, N_FEATURES, HarLayout
from har_tidy.utils.timer import timed

log = logging.getLogger(__name__)

# Receives each finished table by name ("tidy", "average").
TableSink = Callable[[str, pd.DataFrame], None]


@dataclass
class PipelineResult:
    tidy: pd.DataFrame
    average: pd.DataFrame
    timings: Dict[str, float]

    def tables(self) -> Dict[str, pd.DataFrame]:
        return {"tidy": self.tidy, "average": self.average}


def run_pipeline(
    source: LineSource,
    sink: Optional[TableSink] = None,
    n_features: int = N_FEATURES,
    layout: HarLayout = HAR_LAYOUT,
    expected_rows: Optional[int] = None,
) -> PipelineResult:
    """
    Runs assembly then averaging. Both tables are built before the sink sees
    either of them, so a failure never leaves a partial output behind.
    """
    timings: Dict[str, float] = {}
    with timed("assemble", timings):
        tidy = assemble_tidy(source, n_features=n_features, layout=layout, expected_rows=expected_rows)
    with timed("average", timings):
        average = average_by_subject_activity(tidy)

    result = PipelineResult(tidy=tidy, average=average, timings=timings)
    if sink is not None:
        with timed("persist", timings):
            for name, table in result.tables().items():
                sink(name, table)
    return result
