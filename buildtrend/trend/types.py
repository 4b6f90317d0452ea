from enum import Enum


class BuildResult(str, Enum):
    NEW = "New"
    WILL_FAIL = "WillFail"
    SUCCEEDED = "Succeeded"
