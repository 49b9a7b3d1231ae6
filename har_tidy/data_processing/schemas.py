from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

# Reference UCI HAR shape: 2947 test + 7352 train observations of 561 features.
N_FEATURES = 561
REFERENCE_ROWS = 10299

SUBJECT_COL = "subjectId"
ACTIVITY_COL = "activity"
KEY_COLS = (SUBJECT_COL, ACTIVITY_COL)

# Partitions are always concatenated in this order.
PARTITIONS: Tuple[str, ...] = ("test", "train")


@dataclass(frozen=True)
class PartitionSources:
    features: str
    subjects: str
    activities: str


@dataclass(frozen=True)
class HarLayout:
    """Names of the line sources making up one dataset, relative to its root."""

    test: PartitionSources
    train: PartitionSources
    feature_names: str = "features.txt"
    activity_labels: str = "activity_labels.txt"

    def partition(self, name: str) -> PartitionSources:
        if name not in PARTITIONS:
            raise KeyError(f"Unknown partition: {name}")
        return getattr(self, name)

    def all_sources(self) -> Tuple[str, ...]:
        out = []
        for p in PARTITIONS:
            part = self.partition(p)
            out.extend([part.features, part.subjects, part.activities])
        out.extend([self.feature_names, self.activity_labels])
        return tuple(out)


def _uci_partition(split: str) -> PartitionSources:
    return PartitionSources(
        features=f"{split}/X_{split}.txt",
        subjects=f"{split}/subject_{split}.txt",
        activities=f"{split}/y_{split}.txt",
    )


HAR_LAYOUT = HarLayout(test=_uci_partition("test"), train=_uci_partition("train"))
