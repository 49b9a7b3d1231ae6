from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pytest

from har_tidy.data_processing.lines import line_source_from_mapping
from har_tidy.data_processing.schemas import HAR_LAYOUT


def toy_sources() -> Dict[str, List[str]]:
    """Two-feature dataset: one test row and two train rows."""
    return {
        HAR_LAYOUT.test.features: ["1 3"],
        HAR_LAYOUT.train.features: ["2 4", "4 8"],
        HAR_LAYOUT.test.subjects: ["1"],
        HAR_LAYOUT.train.subjects: ["1", "2"],
        HAR_LAYOUT.test.activities: ["1"],
        HAR_LAYOUT.train.activities: ["1", "2"],
        HAR_LAYOUT.feature_names: ["1 mean_a", "2 std_b"],
        HAR_LAYOUT.activity_labels: ["1 WALKING", "2 SITTING"],
    }


@pytest.fixture
def toy_lines() -> Dict[str, List[str]]:
    return toy_sources()


@pytest.fixture
def toy_source(toy_lines):
    return line_source_from_mapping(toy_lines)


def write_dataset(root: Path, lines: Dict[str, List[str]]) -> Path:
    for name, content in lines.items():
        p = root / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("\n".join(content) + "\n", encoding="utf-8")
    return root
