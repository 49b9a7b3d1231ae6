from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union

import pandas as pd

from har_tidy.data_processing.schemas import ACTIVITY_COL

log = logging.getLogger(__name__)

FILE_STEM = "human-activity-recognition"
TABLE_SUFFIX = {"tidy": "", "average": "-average", "meta": "-meta"}


def timestamp_tag() -> str:
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%d_%H%M%S")


def output_path(out_dir: Union[str, Path], table: str, tag: Optional[str] = None, ext: str = ".csv") -> Path:
    if table not in TABLE_SUFFIX:
        raise KeyError(f"Unknown output table: {table}")
    name = FILE_STEM + TABLE_SUFFIX[table]
    if tag:
        name = f"{name}-{tag}"
    return Path(out_dir) / f"{name}{ext}"


def write_table_csv(df: pd.DataFrame, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
    log.info("Wrote %s (%d rows)", path.as_posix(), len(df))
    return path


def csv_sink(out_dir: Union[str, Path], tag: Optional[str] = None, written: Optional[Dict[str, str]] = None):
    """Table sink writing each table to `<out_dir>/human-activity-recognition[-average][-tag].csv`."""

    def sink(name: str, table: pd.DataFrame) -> None:
        path = write_table_csv(table, output_path(out_dir, name, tag))
        if written is not None:
            written[name] = str(path)

    return sink


def write_meta(path: Union[str, Path], meta: Mapping[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(meta, indent=2), encoding="utf-8")
    return path


def read_table_csv(path: Union[str, Path], activity_levels: Sequence[str]) -> pd.DataFrame:
    """Reads a written table back, restoring the ordered activity domain."""
    df = pd.read_csv(path)
    if ACTIVITY_COL in df.columns:
        dtype = pd.CategoricalDtype(categories=list(activity_levels), ordered=True)
        df[ACTIVITY_COL] = df[ACTIVITY_COL].astype(dtype)
    return df
