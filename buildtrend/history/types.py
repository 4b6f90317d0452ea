from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class TaskStatus(str, Enum):
    NEW = "New"
    IN_PROGRESS = "In Progress"
    SUCCEEDED = "Succeeded"
    SUCCEEDED_FLAKY = "Succeeded Flaky"
    FAILED = "Failed"
    SKIPPED = "Skipped"

    def is_final(self) -> bool:
        """True once the status can no longer change."""
        return self in _FINAL_STATUSES


_FINAL_STATUSES = frozenset(
    {
        TaskStatus.SUCCEEDED,
        TaskStatus.SUCCEEDED_FLAKY,
        TaskStatus.FAILED,
        TaskStatus.SKIPPED,
    }
)


@dataclass(frozen=True)
class Task:
    name: str
    status: TaskStatus
    flaky: bool = False


@dataclass(frozen=True)
class TaskEntry:
    task: Task


@dataclass(frozen=True)
class Stage:
    name: str
    tasks: tuple[TaskEntry, ...]

    def __iter__(self) -> Iterator[TaskEntry]:
        return iter(self.tasks)


@dataclass(frozen=True)
class BuildStatus:
    stages: tuple[Stage, ...]
    commit: str | None = None

    def __iter__(self) -> Iterator[TaskEntry]:
        for stage in self.stages:
            yield from stage

    def task_count(self) -> int:
        return sum(len(stage.tasks) for stage in self.stages)

    def task_names(self) -> list[str]:
        return [entry.task.name for entry in self]


class HistoryError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedHistoryFormatError(HistoryError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
