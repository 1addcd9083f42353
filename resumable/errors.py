class EmptyAccess(RuntimeError):
    """A coroutine handle was used while it holds nothing."""

    def __init__(self, message: str = "Accessing empty coroutine handle"):
        super().__init__(message)


class InvalidIncrement(RuntimeError):
    """An iterator that is already at the end was incremented."""

    def __init__(self, message: str = "Incrementing an end iterator"):
        super().__init__(message)
