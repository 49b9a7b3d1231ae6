from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import pandas as pd

from har_tidy.data_processing.activity import ActivityLabeler
from har_tidy.data_processing.errors import ShapeMismatch
from har_tidy.data_processing.lines import LineSource
from har_tidy.data_processing.names import mean_std_mask, normalize_names
from har_tidy.data_processing.parsing import parse_int_column, parse_name_table, parse_numeric_matrix
from har_tidy.data_processing.schemas import (
    ACTIVITY_COL,
    HAR_LAYOUT,
    N_FEATURES,
    PARTITIONS,
    SUBJECT_COL,
    HarLayout,
)

log = logging.getLogger(__name__)


@dataclass
class Partition:
    name: str
    features: np.ndarray
    subjects: np.ndarray
    activity_codes: np.ndarray

    @property
    def n_rows(self) -> int:
        return int(self.features.shape[0])


def load_partition(source: LineSource, layout: HarLayout, name: str, n_features: int) -> Partition:
    """
    Loads one partition's three parallel sequences and checks they line up.

    Subject ids and activity codes are joined to feature rows by position
    only, so their lengths must equal the feature row count.
    """
    srcs = layout.partition(name)
    features = parse_numeric_matrix(source(srcs.features), n_features, source=srcs.features)
    subjects = parse_int_column(source(srcs.subjects), source=srcs.subjects)
    codes = parse_int_column(source(srcs.activities), source=srcs.activities)

    for label, seq in ((srcs.subjects, subjects), (srcs.activities, codes)):
        if len(seq) != features.shape[0]:
            raise ShapeMismatch(
                f"{name} partition: {label} has {len(seq)} rows, "
                f"{srcs.features} has {features.shape[0]}"
            )
    return Partition(name=name, features=features, subjects=subjects, activity_codes=codes)


def merge_partitions(parts: List[Partition], n_features: int, expected_rows: Optional[int] = None) -> Partition:
    # Every parallel sequence is concatenated in the same partition order.
    merged = Partition(
        name="+".join(p.name for p in parts),
        features=np.vstack([p.features for p in parts]),
        subjects=np.concatenate([p.subjects for p in parts]),
        activity_codes=np.concatenate([p.activity_codes for p in parts]),
    )

    want_rows = sum(p.n_rows for p in parts)
    if merged.features.shape != (want_rows, n_features):
        raise ShapeMismatch(f"merged table is {merged.features.shape}, expected ({want_rows}, {n_features})")
    if expected_rows is not None and merged.n_rows != expected_rows:
        raise ShapeMismatch(f"merged table has {merged.n_rows} rows, expected {expected_rows}")
    return merged


def assemble_tidy(
    source: LineSource,
    n_features: int = N_FEATURES,
    layout: HarLayout = HAR_LAYOUT,
    expected_rows: Optional[int] = None,
) -> pd.DataFrame:
    """
    Builds the tidy observation table.

    Rows are test observations followed by train observations. Columns are
    the features whose name mentions "mean" or "std" (case-insensitive, in
    source order), then `subjectId` and the categorical `activity`. All
    column names are normalized.
    """
    log.info("Loading feature data")
    parts = [load_partition(source, layout, p, n_features) for p in PARTITIONS]
    log.info("Checking merged shape (%s)", " + ".join(f"{p.name}={p.n_rows}" for p in parts))
    merged = merge_partitions(parts, n_features, expected_rows=expected_rows)

    log.info("Assigning feature names from %s", layout.feature_names)
    feature_names = parse_name_table(source(layout.feature_names), source=layout.feature_names)
    if len(feature_names) != n_features:
        raise ShapeMismatch(f"{layout.feature_names} names {len(feature_names)} features, expected {n_features}")

    log.info("Selecting mean/std columns")
    mask = np.asarray(mean_std_mask(feature_names), dtype=bool)
    selected = [n for n, keep in zip(feature_names, mask) if keep]
    df = pd.DataFrame(merged.features[:, mask], columns=selected)

    log.info("Attaching subject ids and activity labels")
    labeler = ActivityLabeler.from_lines(source(layout.activity_labels), source=layout.activity_labels)
    df[SUBJECT_COL] = merged.subjects
    df[ACTIVITY_COL] = labeler.categorical(merged.activity_codes)

    df.columns = normalize_names(df.columns)
    log.info("Tidy table: %d observations, %d columns", len(df), df.shape[1])
    return df
