from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from har_tidy.data_processing.errors import MalformedRow, NameCollision, UnknownActivityCode
from har_tidy.data_processing.parsing import to_int


@dataclass(frozen=True)
class ActivityLabeler:
    """
    Ordered activity domain built from an activity label source.

    Codes are 1-based positions into `names`; the categorical order is the
    order of the source, never alphabetical.
    """

    names: Tuple[str, ...]

    def __post_init__(self) -> None:
        seen = set()
        for n in self.names:
            if n in seen:
                raise NameCollision(n, n, n, message=f"Activity label {n!r} is defined more than once")
            seen.add(n)

    @classmethod
    def from_lines(cls, lines: Sequence[str], source: str = "<activity labels>") -> "ActivityLabeler":
        names = []
        for i, line in enumerate(lines):
            parts = line.split()
            if len(parts) < 2:
                raise MalformedRow(source, i + 1, "expected '<code> <name>'")
            try:
                code = to_int(parts[0])
            except ValueError as e:
                raise MalformedRow(source, i + 1, f"activity code is not an integer: {parts[0]!r}") from e
            if code != i + 1:
                raise MalformedRow(source, i + 1, f"expected activity code {i + 1}, got {code}")
            names.append(parts[1])
        return cls(names=tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    @property
    def dtype(self) -> pd.CategoricalDtype:
        return pd.CategoricalDtype(categories=list(self.names), ordered=True)

    def _check(self, codes: np.ndarray) -> None:
        bad = (codes < 1) | (codes > len(self.names))
        if bad.any():
            raise UnknownActivityCode(int(codes[bad][0]), len(self.names))

    def label(self, code: int) -> str:
        if int(code) != code:
            raise UnknownActivityCode(code, len(self.names))
        code = int(code)
        self._check(np.asarray([code]))
        return self.names[code - 1]

    def categorical(self, codes: Sequence[int]) -> pd.Categorical:
        codes = np.asarray(codes, dtype=np.int64)
        self._check(codes)
        return pd.Categorical.from_codes(codes - 1, dtype=self.dtype)
