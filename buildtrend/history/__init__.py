from .loader import load_history
from .source import FileHistorySource, HistorySource
from .types import (
    BuildStatus,
    HistoryError,
    Stage,
    Task,
    TaskEntry,
    TaskStatus,
    UnsupportedHistoryFormatError,
)

__all__ = [
    "load_history",
    "HistorySource",
    "FileHistorySource",
    "BuildStatus",
    "Stage",
    "Task",
    "TaskEntry",
    "TaskStatus",
    "HistoryError",
    "UnsupportedHistoryFormatError",
]
