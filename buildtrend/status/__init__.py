from .handler import get_public_build_status
from .types import NO_BUILDS_MESSAGE, NoBuildsError, PublicStatusResult, StatusError

__all__ = [
    "get_public_build_status",
    "PublicStatusResult",
    "StatusError",
    "NoBuildsError",
    "NO_BUILDS_MESSAGE",
]
