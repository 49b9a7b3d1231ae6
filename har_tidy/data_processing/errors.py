from __future__ import annotations

from typing import Optional, Union


class HarDataError(ValueError):
    """Base class for every fatal input-integrity error raised by the pipeline."""


class SourceUnavailable(HarDataError):
    """A required line source could not be opened or read."""

    def __init__(self, source: str, reason: Optional[str] = None):
        self.source = source
        msg = f"Source unavailable: {source}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class MalformedRow(HarDataError):
    def __init__(self, source: str, line_no: int, reason: str):
        self.source = source
        self.line_no = line_no
        super().__init__(f"{source}:{line_no}: {reason}")


class ShapeMismatch(HarDataError):
    pass


class NameCollision(HarDataError):
    def __init__(self, name: str, first: str, second: str, message: Optional[str] = None):
        self.name = name
        self.raw_names = (first, second)
        super().__init__(message or f"Names {first!r} and {second!r} both normalize to {name!r}")


class UnknownActivityCode(HarDataError):
    def __init__(self, code: Union[int, float], n_labels: int):
        self.code = code
        self.n_labels = n_labels
        super().__init__(f"Activity code {code} outside valid range 1..{n_labels}")
