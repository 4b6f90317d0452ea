from dataclasses import dataclass

from buildtrend.trend.types import BuildResult

NO_BUILDS_MESSAGE = (
    "No successful or failed builds found. "
    "The system might be having trouble catching up with the rate of commits."
)


@dataclass(frozen=True)
class PublicStatusResult:
    anticipated_build_status: BuildResult


class StatusError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class NoBuildsError(StatusError):
    def __init__(self) -> None:
        super().__init__(NO_BUILDS_MESSAGE)
