from .history import BuildStatus, FileHistorySource, HistorySource, load_history
from .status import NoBuildsError, PublicStatusResult, get_public_build_status
from .trend import BuildResult, compute_trend

__all__ = [
    "compute_trend",
    "BuildResult",
    "get_public_build_status",
    "PublicStatusResult",
    "NoBuildsError",
    "load_history",
    "BuildStatus",
    "HistorySource",
    "FileHistorySource",
]
