from __future__ import annotations

import pytest

from har_tidy.utils.config import apply_overrides, ensure_dirs, har_settings, load_config


def test_extends_merges_parents(tmp_path):
    (tmp_path / "base.yaml").write_text(
        "logging:\n  level: INFO\ndatasets:\n  har:\n    n_features: 561\n    raw_dir: base\n",
        encoding="utf-8",
    )
    (tmp_path / "run.yaml").write_text(
        "extends: base.yaml\ndatasets:\n  har:\n    raw_dir: data/raw\n",
        encoding="utf-8",
    )
    cfg = load_config(tmp_path / "run.yaml")

    assert cfg["datasets"]["har"] == {"n_features": 561, "raw_dir": "data/raw"}
    assert cfg["logging"]["level"] == "INFO"
    assert "extends" not in cfg
    assert cfg["_meta"]["config_path"].endswith("run.yaml")


def test_bad_extends(tmp_path):
    (tmp_path / "run.yaml").write_text("extends: 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(tmp_path / "run.yaml")


def test_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_har_settings_requires_raw_dir():
    with pytest.raises(ValueError):
        har_settings({"datasets": {"har": {}}})


def test_overrides_and_dirs(tmp_path):
    cfg = apply_overrides(
        {"datasets": {"har": {"raw_dir": "a", "n_features": 561}}},
        raw_dir="b",
        out_dir=tmp_path / "out",
    )
    assert cfg["datasets"]["har"] == {"raw_dir": "b", "n_features": 561}
    assert ensure_dirs(cfg) == tmp_path / "out"
    assert (tmp_path / "out").is_dir()
