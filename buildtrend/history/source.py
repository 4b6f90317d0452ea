from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence

from .loader import load_history
from .types import BuildStatus


class HistorySource(Protocol):
    def query_build_statuses(self) -> Sequence[BuildStatus]:
        """Return build statuses, newest build first."""
        ...


class FileHistorySource:
    def __init__(self, path: str | Path):
        self.path = path

    def query_build_statuses(self) -> list[BuildStatus]:
        return load_history(self.path)
