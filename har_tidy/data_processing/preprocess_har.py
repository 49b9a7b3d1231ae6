from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from har_tidy.data_processing.export import csv_sink, output_path, timestamp_tag, write_meta
from har_tidy.data_processing.lines import line_source_from_mapping, read_sources
from har_tidy.data_processing.pipeline import run_pipeline
from har_tidy.data_processing.schemas import ACTIVITY_COL, HAR_LAYOUT, N_FEATURES, REFERENCE_ROWS
from har_tidy.utils.config import ensure_dirs, har_settings
from har_tidy.utils.timer import timed

log = logging.getLogger(__name__)


def preprocess_har(cfg: Dict, tag: Optional[str] = None) -> Dict[str, object]:
    ds = har_settings(cfg)
    out_cfg = cfg.get("output", {}) or {}
    raw_dir = Path(ds["raw_dir"])
    n_features = int(ds.get("n_features", N_FEATURES))
    # Omitted means the reference shape; an explicit null skips the check.
    expected_rows = ds.get("expected_rows", REFERENCE_ROWS)
    expected_rows = int(expected_rows) if expected_rows is not None else None

    if tag is None and out_cfg.get("timestamped", True):
        tag = timestamp_tag()

    timings: Dict[str, float] = {}
    with timed("load", timings):
        lines = read_sources(raw_dir, HAR_LAYOUT.all_sources())

    out_dir = ensure_dirs(cfg)
    written: Dict[str, str] = {}
    result = run_pipeline(
        line_source_from_mapping(lines),
        sink=csv_sink(out_dir, tag=tag, written=written),
        n_features=n_features,
        layout=HAR_LAYOUT,
        expected_rows=expected_rows,
    )
    timings.update(result.timings)

    if out_cfg.get("write_meta", True):
        meta = {
            "dataset": "UCI HAR",
            "raw_dir": raw_dir.as_posix(),
            "n_observations": int(len(result.tidy)),
            "n_groups": int(len(result.average)),
            "n_columns": int(result.tidy.shape[1]),
            "activity_levels": list(result.tidy[ACTIVITY_COL].cat.categories),
            "outputs": dict(written),
            "timings_sec": timings,
        }
        written["meta"] = str(write_meta(output_path(out_dir, "meta", tag, ext=".json"), meta))

    log.info("HAR preprocessing complete: %s", written.get("tidy"))
    return {"paths": written, "timings": timings, "result": result}
