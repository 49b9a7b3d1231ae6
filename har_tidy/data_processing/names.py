from __future__ import annotations

import re
from typing import Dict, Iterable, List, Sequence

from har_tidy.data_processing.errors import NameCollision

_PUNCT_RE = re.compile(r"[(),-]")
_UNDERSCORES_RE = re.compile(r"_{2,}")
_SELECT_RE = re.compile(r"mean|std", re.IGNORECASE)


def normalize_name(name: str) -> str:
    # CSV readers mangle "(", ")", "," and "-" in headers, even quoted.
    out = _PUNCT_RE.sub("_", name)
    out = _UNDERSCORES_RE.sub("_", out)
    return out.rstrip("_")


def normalize_names(names: Iterable[str]) -> List[str]:
    seen: Dict[str, str] = {}
    out: List[str] = []
    for raw in names:
        norm = normalize_name(raw)
        if norm in seen:
            raise NameCollision(norm, seen[norm], raw)
        seen[norm] = raw
        out.append(norm)
    return out


def is_mean_or_std(name: str) -> bool:
    return _SELECT_RE.search(name) is not None


def mean_std_mask(names: Sequence[str]) -> List[bool]:
    return [is_mean_or_std(n) for n in names]
