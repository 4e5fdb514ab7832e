class CheckFailed(Exception):
    """
    A check did not succeed yet. Raising this from a check drives another attempt.
    """


class UnexpectedCheckError(CheckFailed):
    """
    A check raised something other than :class:`CheckFailed`.
    The wrapped exception is kept as ``__cause__``.
    """

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(f"unexpected error in check: {type(error).__name__}: {error}")


class WaitTimeout(Exception):
    """
    Raised when the time budget of a wait is exhausted before the check succeeded.
    """

    def __init__(self, description: str, last_error: CheckFailed):
        self.description = description
        self.last_error = last_error
        super().__init__(f"{description}: {last_error}")


class UpdateFailed(Exception):
    """
    Raised when a resource update could not be applied, e.g. because
    write conflicts kept happening.
    """

    def __init__(self, name: str, error: Exception):
        self.name = name
        self.error = error
        super().__init__(f"unable to update deployment {name!r}: {error}")


class ResourceConflict(Exception):
    """
    The API server rejected a write because the object changed since it was read.
    """
