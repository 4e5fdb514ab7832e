from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INITIAL_INTERVAL = 0.5
DEFAULT_MULTIPLIER = 1.5
DEFAULT_MAX_INTERVAL = 60.0


class PollSpec(BaseModel):
    """
    Exponential backoff parameters for a single poll.
    """

    model_config = ConfigDict(frozen=True)

    max_elapsed_time: float = Field(ge=0)
    """
    Seconds after which no further attempt is started.
    """

    initial_interval: float = Field(default=DEFAULT_INITIAL_INTERVAL, gt=0)
    """
    Seconds to wait after the first failed attempt.
    """

    multiplier: float = Field(default=DEFAULT_MULTIPLIER, ge=1)
    """
    Growth factor applied to the interval after each failed attempt.
    """

    max_interval: float = Field(default=DEFAULT_MAX_INTERVAL, gt=0)
    """
    Upper bound for a single interval.
    """

    def interval(self, attempt: int) -> float:
        """
        The wait after the given (1-based) failed attempt.
        """
        if attempt < 1:
            raise ValueError("Attempts are counted from 1.")

        return min(self.initial_interval * self.multiplier ** (attempt - 1), self.max_interval)
