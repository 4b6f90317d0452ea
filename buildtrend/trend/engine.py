from __future__ import annotations

import logging
from typing import Sequence

from buildtrend.history.types import BuildStatus, TaskStatus

from .types import BuildResult

logger = logging.getLogger(__name__)

_FAILING = frozenset({TaskStatus.FAILED, TaskStatus.SKIPPED})


def compute_trend(history: Sequence[BuildStatus]) -> BuildResult:
    """
    Anticipate the outcome of the current build from its history.

    ``history`` must be ordered newest build first. Only tasks present in the
    newest build are considered; older builds are consulted to find the
    latest final status of each of them. Any non-flaky task whose latest
    final status is failed or skipped makes the build fail.
    """
    resolved: dict[str, bool] = {}

    for depth, status in enumerate(history):
        for entry in status:
            task = entry.task
            if depth == 0:
                # Tasks removed from CI no longer matter.
                resolved[task.name] = False

            if resolved.get(task.name, True):
                continue
            if not (task.flaky or task.status.is_final()):
                continue

            resolved[task.name] = True
            if not task.flaky and task.status in _FAILING:
                logger.debug(
                    "Task %s is %s in build #%d", task.name, task.status.value, depth
                )
                return BuildResult.WILL_FAIL

    if not resolved:
        logger.debug("Newest build has no tasks")
        return BuildResult.WILL_FAIL

    if logger.isEnabledFor(logging.DEBUG):
        pending = [name for name, done in resolved.items() if not done]
        if pending:
            logger.debug("No final status for: %s", ", ".join(sorted(pending)))

    return BuildResult.SUCCEEDED
