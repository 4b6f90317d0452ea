from .engine import compute_trend
from .types import BuildResult

__all__ = ["compute_trend", "BuildResult"]
