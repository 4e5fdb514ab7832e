from kubewait.model.config import CI_TIMEOUT_MULTIPLIER, CIConfig
from kubewait.model.poll import PollSpec

__all__ = ("CI_TIMEOUT_MULTIPLIER", "CIConfig", "PollSpec")
