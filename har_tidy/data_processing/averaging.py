from __future__ import annotations

import logging
from typing import List

import pandas as pd

from har_tidy.data_processing.schemas import ACTIVITY_COL, KEY_COLS, SUBJECT_COL

log = logging.getLogger(__name__)


def value_columns(tidy: pd.DataFrame) -> List[str]:
    cols: List[str] = []
    for c in tidy.columns:
        if c in KEY_COLS:
            continue
        if pd.api.types.is_numeric_dtype(tidy[c]):
            cols.append(c)
        else:
            log.warning("Skipping non-numeric column %r when averaging", c)
    return cols


def average_by_subject_activity(tidy: pd.DataFrame) -> pd.DataFrame:
    """
    Means every numeric column per observed (subjectId, activity) pair.

    Output columns are subjectId, activity, then the averaged columns in
    their tidy order. Rows are sorted by subjectId, then by the activity's
    position in its categorical domain. Unobserved pairs are not emitted.
    """
    missing = [c for c in KEY_COLS if c not in tidy.columns]
    if missing:
        raise KeyError(f"Tidy table lacks grouping columns: {missing}")

    activity_dtype = tidy[ACTIVITY_COL].dtype
    cols = value_columns(tidy)

    avg = (
        tidy.groupby([SUBJECT_COL, ACTIVITY_COL], sort=True, observed=True)[cols]
        .mean()
        .reset_index()
    )
    if isinstance(activity_dtype, pd.CategoricalDtype):
        avg[ACTIVITY_COL] = avg[ACTIVITY_COL].astype(activity_dtype)

    log.info("Averaged table: %d groups from %d observations", len(avg), len(tidy))
    return avg[[SUBJECT_COL, ACTIVITY_COL, *cols]]
