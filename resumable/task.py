from collections.abc import Callable
from functools import wraps
from typing import ClassVar
from typing import Self

from .errors import EmptyAccess
from .frame import Body
from .frame import Frame
from .suspension import Suspension


class BasicTask[R](Suspension[R]):
    """A computation that produces a single result.

    The handle owns its frame exclusively. ``wait`` and ``get`` consume
    the result, leaving the handle empty whether the computation returned
    or raised. Closing a handle, or dropping the last reference to it,
    discards the frame where it is paused.
    """

    initial_suspend: ClassVar[bool]

    def __init__(self, body: Body[R] | None = None, /):
        if not hasattr(type(self), "initial_suspend"):
            raise TypeError(
                f"{type(self).__name__} cannot be created directly, "
                "use Task or LazyTask"
            )
        self.__frame: Frame[R] | None = None if body is None else Frame(body)
        if self.__frame is not None and not self.initial_suspend:
            self.__frame.resume()

    def __repr__(self):
        if self.__frame is None:
            state = "empty"
        elif self.__frame.done():
            state = "done"
        else:
            state = "pending"
        return f"<{type(self).__name__} {state}>"

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __owned(self) -> Frame[R]:
        if self.__frame is None:
            raise EmptyAccess
        return self.__frame

    def empty(self) -> bool:
        return self.__frame is None

    def __bool__(self) -> bool:
        return not self.empty()

    def move(self) -> Self:
        """Hand the frame over to a new handle, leaving this one empty."""
        moved = type(self)()
        moved.__frame, self.__frame = self.__frame, None
        return moved

    def close(self) -> None:
        frame, self.__frame = self.__frame, None
        if frame is not None:
            frame.close()

    def done(self) -> bool:
        return self.__owned().done()

    def resume(self) -> None:
        """Run to the next suspension point, unless already done."""
        frame = self.__owned()
        if not frame.done():
            frame.resume()

    def wait(self) -> R:
        """Run to completion and give up the result.

        Raises the captured error if the computation failed.
        """
        frame = self.__owned()
        try:
            while not frame.done():
                frame.resume()
            return frame.slot.take()
        finally:
            self.__frame = None

    get = wait

    def ready(self) -> bool:
        return self.done()

    def step(self) -> None:
        self.resume()

    def result(self) -> R:
        return self.wait()


class Task[R](BasicTask[R]):
    """A task that runs up to its first suspension point when created."""

    initial_suspend = False


class LazyTask[R](BasicTask[R]):
    """A task that does nothing until it is first resumed."""

    initial_suspend = True


def task[**A, R](fn: Callable[A, Body[R]]) -> Callable[A, Task[R]]:
    """Decorate a generator or coroutine function to return an eager task."""

    @wraps(fn)
    def wrapper(*args: A.args, **kwargs: A.kwargs) -> Task[R]:
        return Task(fn(*args, **kwargs))

    return wrapper


def lazy_task[**A, R](fn: Callable[A, Body[R]]) -> Callable[A, LazyTask[R]]:
    """Decorate a generator or coroutine function to return a lazy task."""

    @wraps(fn)
    def wrapper(*args: A.args, **kwargs: A.kwargs) -> LazyTask[R]:
        return LazyTask(fn(*args, **kwargs))

    return wrapper
