from __future__ import annotations

import logging
from typing import Callable, Sequence

from buildtrend.history import BuildStatus, HistorySource
from buildtrend.trend import BuildResult, compute_trend

from .types import NoBuildsError, PublicStatusResult

logger = logging.getLogger(__name__)


def get_public_build_status(
    source: HistorySource,
    *,
    trend: Callable[[Sequence[BuildStatus]], BuildResult] = compute_trend,
) -> PublicStatusResult:
    # Fetch errors propagate to the caller untouched.
    statuses = source.query_build_statuses()
    result = trend(statuses)
    logger.debug("Anticipated %s from %d build(s)", result.value, len(statuses))

    if result == BuildResult.NEW:
        raise NoBuildsError()

    return PublicStatusResult(anticipated_build_status=result)
