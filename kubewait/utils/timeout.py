import functools
import time
from collections.abc import Callable
from typing import TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_delay,
)

from kubewait.exceptions import CheckFailed, UnexpectedCheckError, WaitTimeout
from kubewait.logger import get_logger
from kubewait.model.config import CIConfig
from kubewait.model.poll import (
    DEFAULT_INITIAL_INTERVAL,
    DEFAULT_MAX_INTERVAL,
    DEFAULT_MULTIPLIER,
    PollSpec,
)

T = TypeVar("T")

logger = get_logger(__name__)


def guard(check: Callable[[], T]) -> Callable[[], T]:
    """
    Wrap a check so that any unexpected exception surfaces as a
    :class:`~kubewait.exceptions.CheckFailed` instead of aborting the poll.
    """

    @functools.wraps(check)
    def guarded() -> T:
        try:
            return check()
        except CheckFailed:
            raise
        except Exception as err:
            logger.debug("Check raised an unexpected error.", exc_info=True)
            raise UnexpectedCheckError(err) from err

    return guarded


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    upcoming = retry_state.next_action.sleep if retry_state.next_action else 0.0
    logger.debug(
        "Attempt %s failed, retrying in %.2fs: %s",
        retry_state.attempt_number,
        upcoming,
        error,
    )


def poll(
    check: Callable[[], T],
    spec: PollSpec,
    *,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Invoke ``check`` until it returns or ``spec.max_elapsed_time`` is exhausted.

    The check always runs at least once. Between attempts the interval grows by
    ``spec.multiplier`` up to ``spec.max_interval``.

    Args:
        check: Zero-argument callable. Returning is success, raising ``CheckFailed``
          (or anything else) is a failure.
        spec (PollSpec): The backoff parameters.
        sleep: Function used to wait between attempts.

    Returns:
        Whatever the successful invocation of ``check`` returned.

    Raises:
        CheckFailed: The last failure, once the time budget is exhausted.
    """
    retrying = Retrying(
        stop=stop_after_delay(spec.max_elapsed_time),
        wait=lambda retry_state: spec.interval(retry_state.attempt_number),
        retry=retry_if_exception_type(CheckFailed),
        before_sleep=_log_retry,
        sleep=sleep,
        reraise=True,
    )
    result = retrying(guard(check))
    attempts = retrying.statistics.get("attempt_number", 1)
    if attempts > 1:
        logger.info("Check succeeded after %s attempts.", attempts)

    return result


class Poller:
    """
    Runs checks with exponential backoff, scaling timeouts for CI.

    Args:
        ci_config (CIConfig | None): Explicit CI configuration. When ``None``, the
          environment is read again on every call.
        sleep: Function used to wait between attempts.
        initial_interval (float): First wait in seconds.
        multiplier (float): Growth factor of the wait.
        max_interval (float): Cap for a single wait in seconds.
    """

    def __init__(
        self,
        ci_config: CIConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
        initial_interval: float = DEFAULT_INITIAL_INTERVAL,
        multiplier: float = DEFAULT_MULTIPLIER,
        max_interval: float = DEFAULT_MAX_INTERVAL,
    ):
        self.ci_config = ci_config
        self.sleep = sleep
        self.initial_interval = initial_interval
        self.multiplier = multiplier
        self.max_interval = max_interval

    def resolve_ci_config(self) -> CIConfig:
        return self.ci_config if self.ci_config is not None else CIConfig.from_env()

    def spec_for(self, timeout: float) -> PollSpec:
        return PollSpec(
            max_elapsed_time=max(0.0, self.resolve_ci_config().apply(timeout)),
            initial_interval=self.initial_interval,
            multiplier=self.multiplier,
            max_interval=self.max_interval,
        )

    def run(self, check: Callable[[], T], timeout: float, description: str) -> T:
        """
        Poll ``check`` for up to ``timeout`` seconds (CI-scaled).

        Raises:
            WaitTimeout: Carrying ``description`` and the last failure.
        """
        try:
            return poll(check, self.spec_for(timeout), sleep=self.sleep)
        except CheckFailed as err:
            raise WaitTimeout(description, err) from err
