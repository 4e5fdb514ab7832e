from kubewait.exceptions import (
    CheckFailed,
    ResourceConflict,
    UnexpectedCheckError,
    UpdateFailed,
    WaitTimeout,
)
from kubewait.model.config import CIConfig
from kubewait.model.poll import PollSpec
from kubewait.utils.timeout import Poller, guard, poll
from kubewait.wait import Try

__all__ = (
    "CIConfig",
    "CheckFailed",
    "PollSpec",
    "Poller",
    "ResourceConflict",
    "Try",
    "UnexpectedCheckError",
    "UpdateFailed",
    "WaitTimeout",
    "guard",
    "poll",
)
