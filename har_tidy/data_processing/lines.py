from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Sequence, Union

from tqdm import tqdm

from har_tidy.data_processing.errors import SourceUnavailable

log = logging.getLogger(__name__)

# Maps a logical source name (e.g. "test/X_test.txt") to its trimmed lines.
LineSource = Callable[[str], Sequence[str]]


def load_text_lines(path: Union[str, Path]) -> List[str]:
    """Reads a text file into a list of lines with surrounding whitespace removed."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return [line.strip() for line in f]
    except OSError as e:
        raise SourceUnavailable(path.as_posix(), e.strerror or type(e).__name__) from e
    except UnicodeDecodeError as e:
        raise SourceUnavailable(path.as_posix(), "not valid UTF-8") from e


def read_sources(raw_dir: Union[str, Path], names: Iterable[str]) -> Dict[str, List[str]]:
    raw_dir = Path(raw_dir)
    if not raw_dir.is_dir():
        raise SourceUnavailable(raw_dir.as_posix(), "dataset directory not found")

    out: Dict[str, List[str]] = {}
    for name in tqdm(list(names), desc="Loading HAR sources"):
        out[name] = load_text_lines(raw_dir / name)
        log.debug("Loaded %s: %d lines", name, len(out[name]))
    return out


def line_source_from_mapping(mapping: Mapping[str, Sequence[str]]) -> LineSource:
    def source(name: str) -> Sequence[str]:
        try:
            return mapping[name]
        except KeyError:
            raise SourceUnavailable(name, "not provided") from None

    return source
