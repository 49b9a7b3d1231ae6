from __future__ import annotations

from typing import List, Sequence

import numpy as np

from har_tidy.data_processing.errors import MalformedRow


def to_float(token: str) -> float:
    # float() also accepts "1_0" digit grouping, which is not a data value.
    if "_" in token:
        raise ValueError(f"could not convert string to float: {token!r}")
    return float(token)


def to_int(token: str) -> int:
    if "_" in token:
        raise ValueError(f"invalid literal for int(): {token!r}")
    return int(token)


def parse_numeric_matrix(lines: Sequence[str], n_fields: int, source: str = "<lines>") -> np.ndarray:
    """
    Parses whitespace-delimited numeric lines into an (n_lines, n_fields) float64 array.

    Every line is validated before anything is returned: the first line with a
    token count other than n_fields, or with a token that is not a number,
    raises MalformedRow.
    """
    out = np.empty((len(lines), n_fields), dtype=np.float64)
    for i, line in enumerate(lines):
        tokens = line.split()
        if len(tokens) != n_fields:
            raise MalformedRow(source, i + 1, f"expected {n_fields} fields, got {len(tokens)}")
        try:
            out[i] = [to_float(t) for t in tokens]
        except ValueError as e:
            raise MalformedRow(source, i + 1, f"non-numeric field ({e})") from e
    return out


def parse_int_column(lines: Sequence[str], source: str = "<lines>") -> np.ndarray:
    """Parses one integer per line (subject ids, activity codes)."""
    values: List[int] = []
    for i, line in enumerate(lines):
        tokens = line.split()
        if len(tokens) != 1:
            raise MalformedRow(source, i + 1, f"expected a single integer, got {len(tokens)} fields")
        try:
            values.append(to_int(tokens[0]))
        except ValueError as e:
            raise MalformedRow(source, i + 1, f"not an integer: {tokens[0]!r}") from e
    return np.asarray(values, dtype=np.int64)


def parse_name_table(lines: Sequence[str], source: str = "<lines>") -> List[str]:
    """
    Parses `<index> <name>` lines and returns the names in file order.
    The index is not interpreted here.
    """
    names: List[str] = []
    for i, line in enumerate(lines):
        parts = line.split()
        if len(parts) < 2:
            raise MalformedRow(source, i + 1, "expected '<index> <name>'")
        names.append(parts[1])
    return names
