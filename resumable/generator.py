from __future__ import annotations

import logging
from collections.abc import Callable
from collections.abc import Generator as GeneratorType
from collections.abc import Iterator as IteratorType
from functools import wraps
from typing import Any
from typing import Self
from typing import cast

from .errors import EmptyAccess
from .errors import InvalidIncrement
from .frame import Frame
from .result import Err
from .result import Ok
from .result import Outcome
from .result import Pending
from .suspension import Suspension

logger = logging.getLogger(__name__)


class Generator[T]:
    """A lazily produced sequence of elements.

    The body is a generator function's generator. Nothing runs until
    ``begin()`` moves the frame into an iterator, which then pulls one
    element at a time. Inside the body, ``yield from`` a suspension (such
    as a task) waits for it without producing an element.
    """

    def __init__(self, body: GeneratorType[T, None, Any] | None = None, /):
        if body is not None and not isinstance(body, GeneratorType):
            raise TypeError(
                f"A generator needs a generator object, got {type(body).__name__}"
            )
        self.__frame: Frame[Any] | None = None if body is None else Frame(body)

    def __repr__(self):
        state = "empty" if self.__frame is None else "pending"
        return f"<{type(self).__name__} {state}>"

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def empty(self) -> bool:
        return self.__frame is None

    def __bool__(self) -> bool:
        return not self.empty()

    def move(self) -> Self:
        moved = type(self)()
        moved.__frame, self.__frame = self.__frame, None
        return moved

    def close(self) -> None:
        frame, self.__frame = self.__frame, None
        if frame is not None:
            frame.close()

    def begin(self) -> Iterator[T]:
        """Move the frame into an iterator positioned at the first element.

        The generator is empty afterward, so a second call gives an end
        iterator.
        """
        frame, self.__frame = self.__frame, None
        return Iterator(frame)

    def end(self) -> Iterator[T]:
        return Iterator()

    def __iter__(self) -> IteratorType[T]:
        iterator, end = self.begin(), self.end()
        while iterator != end:
            yield iterator.value
            iterator.increment().complete()


class Iterator[T]:
    """A single-pass position in a generator's sequence.

    An iterator either owns the generator's frame or is an end iterator.
    Only two end iterators compare equal.
    """

    def __init__(self, frame: Frame[Any] | None = None, /):
        self.__frame = frame
        self.__element: Outcome[T] = Pending()
        self.__advancing = False
        self.__advances = 0
        if frame is not None:
            self.__advancing = True
            self.__settle()

    def __repr__(self):
        if self.__advancing:
            state = "advancing"
        elif self.at_end():
            state = "end"
        else:
            state = repr(self.__element)
        return f"<{type(self).__name__} {state}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iterator):
            return NotImplemented
        return self.at_end() and other.at_end()

    def _advances(self) -> int:
        return self.__advances

    def _pending(self, advance: int) -> bool:
        """Whether the numbered advance is still in progress."""
        return self.__advancing and self.__advances == advance

    def _step(self) -> None:
        """Resume the frame once on behalf of an in-progress advance."""
        frame = self.__frame
        if not self.__advancing or frame is None:
            return

        frame.resume()
        if frame.produced:
            self.__element = Ok(cast(T, frame.yielded))
            self.__advancing = False
        elif frame.done():
            self.__frame = None
            self.__advancing = False
            if isinstance(outcome := frame.slot.outcome, Err):
                self.__element = outcome
            logger.debug("Iterator over %s reached the end", frame.name)

    def __settle(self) -> None:
        while self.__advancing:
            self._step()

    def at_end(self) -> bool:
        self.__settle()
        return self.__frame is None and not isinstance(self.__element, Err)

    @property
    def value(self) -> T:
        """The current element, left in place."""
        return self.__get(take=False)

    def take(self) -> T:
        """The current element, moved out of the iterator."""
        return self.__get(take=True)

    def __get(self, *, take: bool) -> T:
        self.__settle()
        match self.__element:
            case Ok(value=value):
                if take:
                    self.__element = Pending()
                return value
            case Err(error=error):
                self.__element = Pending()
                raise error
        raise EmptyAccess

    def increment(self) -> Advance:
        """Start moving to the next element.

        The returned token finishes the move when it is awaited, completed,
        or dropped.
        """
        self.__settle()
        if self.__frame is None:
            raise InvalidIncrement
        self.__element = Pending()
        self.__advancing = True
        self.__advances += 1
        return Advance(self)

    def close(self) -> None:
        frame, self.__frame = self.__frame, None
        self.__advancing = False
        self.__element = Pending()
        if frame is not None:
            frame.close()


class Advance(Suspension[None]):
    """An in-progress move of an iterator to its next element."""

    def __init__(self, iterator: Iterator[Any], /):
        self.__iterator = iterator
        self.__advance = iterator._advances()

    def __repr__(self):
        return f"<{type(self).__name__} ready={self.ready()}>"

    def __del__(self):
        self.complete()

    def ready(self) -> bool:
        return not self.__iterator._pending(self.__advance)

    def step(self) -> None:
        if not self.ready():
            self.__iterator._step()

    def result(self) -> None:
        return None

    def complete(self) -> None:
        while not self.ready():
            self.step()


def generator[**A, T](
    fn: Callable[A, GeneratorType[T, None, Any]],
) -> Callable[A, Generator[T]]:
    """Decorate a generator function to return a lazy ``Generator``."""

    @wraps(fn)
    def wrapper(*args: A.args, **kwargs: A.kwargs) -> Generator[T]:
        return Generator(fn(*args, **kwargs))

    return wrapper
