from abc import abstractmethod
from collections.abc import Awaitable
from collections.abc import Generator
from typing import Self


class Suspension[R](Awaitable[R]):
    """Base class for everything a computation body can wait on.

    A body that awaits a suspension that is not ready yields the suspension
    to the frame driving it. The frame then steps the suspension each time
    it is resumed, and only continues the body once the suspension is ready.
    """

    @abstractmethod
    def ready(self) -> bool:
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def step(self) -> None:
        """Make one unit of progress toward being ready."""
        raise NotImplementedError("Subclasses must implement this method.")

    @abstractmethod
    def result(self) -> R:
        raise NotImplementedError("Subclasses must implement this method.")

    def __await__(self) -> Generator[Self, None, R]:
        if not self.ready():
            yield self
        return self.result()

    # Allows ``yield from suspension`` in plain generator bodies.
    __iter__ = __await__
