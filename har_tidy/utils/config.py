from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

PathLike = Union[str, Path]


def load_yaml(path: PathLike) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/dict: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merges override into base (override wins)."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, Mapping):
            out[k] = _deep_merge(out[k], v)  # type: ignore[arg-type]
        else:
            out[k] = v
    return out


def _parent_paths(extends: Any, here: Path) -> List[Path]:
    if isinstance(extends, (str, Path)):
        parents = [extends]
    elif isinstance(extends, list):
        parents = extends
    else:
        raise ValueError("Config key 'extends' must be a string or a list of strings.")

    out: List[Path] = []
    for parent in parents:
        p = Path(parent)
        out.append(p if p.is_absolute() else (here.parent / p).resolve())
    return out


def load_config(path: PathLike) -> Dict[str, Any]:
    """
    Loads a YAML run config with optional inheritance:
      extends: "base.yaml"
    or
      extends: ["base.yaml", "local.yaml"]

    Parents are merged left to right, the file itself last. Relative parent
    paths resolve against the directory of the file that names them.
    """
    path = Path(path)
    cfg = load_yaml(path)

    merged: Dict[str, Any] = {}
    extends = cfg.pop("extends", None)
    if extends:
        for parent_path in _parent_paths(extends, path):
            merged = _deep_merge(merged, load_config(parent_path))

    merged = _deep_merge(merged, cfg)
    merged.setdefault("_meta", {})
    merged["_meta"]["config_path"] = str(path.resolve())
    return merged


def har_settings(cfg: Mapping[str, Any]) -> Dict[str, Any]:
    """Returns the `datasets.har` block, failing early when raw_dir is missing."""
    ds = (cfg.get("datasets", {}) or {}).get("har")
    if not isinstance(ds, dict) or not ds.get("raw_dir"):
        raise ValueError("Config must define datasets.har.raw_dir")
    return ds


def apply_overrides(
    cfg: Dict[str, Any],
    raw_dir: Optional[PathLike] = None,
    out_dir: Optional[PathLike] = None,
    log_level: Optional[str] = None,
) -> Dict[str, Any]:
    """Folds CLI overrides into a loaded config (override wins)."""
    patch: Dict[str, Any] = {}
    if raw_dir is not None:
        patch["datasets"] = {"har": {"raw_dir": str(raw_dir)}}
    if out_dir is not None:
        patch["output"] = {"dir": str(out_dir)}
    if log_level is not None:
        patch["logging"] = {"level": log_level}
    return _deep_merge(cfg, patch)


def ensure_dirs(cfg: Mapping[str, Any]) -> Path:
    """
    Creates the output directory named by `output.dir` and returns it.
    Safe to call multiple times.
    """
    output = cfg.get("output", {}) or {}
    out_dir = Path(output.get("dir") or "data/processed/har")
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir
