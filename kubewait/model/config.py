import math
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from kubewait.logger import get_logger

CI_TIMEOUT_MULTIPLIER = 3.0
"""
The multiplier for all timeouts in the CI.
"""

CI_ENV_VAR = "CI"
CI_TIMEOUT_MULTIPLIER_ENV_VAR = "CI_TIMEOUT_MULTIPLIER"

logger = get_logger(__name__)


class CIConfig(BaseModel):
    """
    Controls how timeouts are scaled when running in continuous integration.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    """
    Whether timeouts get scaled at all.
    """

    multiplier: float = CI_TIMEOUT_MULTIPLIER
    """
    Scale factor applied to every timeout when enabled.
    """

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CIConfig":
        """
        Resolve the configuration from ``CI`` and ``CI_TIMEOUT_MULTIPLIER``.

        Args:
            environ (Mapping[str, str] | None): Defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ
        return cls(
            enabled=bool(env.get(CI_ENV_VAR)),
            multiplier=_parse_multiplier(env.get(CI_TIMEOUT_MULTIPLIER_ENV_VAR)),
        )

    def apply(self, timeout: float) -> float:
        if not self.enabled:
            return timeout

        logger.debug("Apply CI multiplier: %s", self.multiplier)
        return timeout * self.multiplier


def _parse_multiplier(value: str | None) -> float:
    if not value:
        return CI_TIMEOUT_MULTIPLIER

    try:
        multiplier = float(value)
    except ValueError:
        multiplier = math.nan

    if not math.isfinite(multiplier) or multiplier < 0:
        logger.debug("Ignoring invalid %s=%r", CI_TIMEOUT_MULTIPLIER_ENV_VAR, value)
        return CI_TIMEOUT_MULTIPLIER

    return multiplier
