import logging
from collections.abc import Callable
from collections.abc import Coroutine
from collections.abc import Generator
from enum import Enum
from functools import partial
from typing import Any
from typing import cast

from .result import Slot
from .suspension import Suspension

logger = logging.getLogger(__name__)


class FrameState(Enum):
    CREATED = "created"
    SUSPENDED = "suspended"
    RUNNING = "running"
    DONE = "done"
    CLOSED = "closed"


type Body[R] = Generator[Any, None, R] | Coroutine[Any, None, R]


class Frame[R]:
    """The paused state of one computation, exclusively owned by one handle.

    The body is a generator or coroutine object. Each resume runs it to its
    next suspension point. What the body yields decides what that point is:
    a ``Suspension`` is awaited, and stepped on each later resume until it
    is ready; anything else is an element produced by the body.
    """

    __state = FrameState.CLOSED

    def __init__(self, body: Body[R], /):
        if not isinstance(body, Generator | Coroutine):
            raise TypeError(
                f"A frame needs a generator or coroutine, got {type(body).__name__}"
            )
        self.__body = body
        self.__state = FrameState.CREATED
        self.__awaiting: Suspension[Any] | None = None
        self.__produced = False
        self.__yielded: Any = None
        self.__slot = Slot[R]()
        logger.debug("Frame %s created", self.name)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name} {self.__state.value}>"

    def __del__(self):
        if self.__state in (FrameState.CREATED, FrameState.SUSPENDED):
            self.__body.close()

    @property
    def name(self) -> str:
        return getattr(self.__body, "__qualname__", type(self.__body).__name__)

    @property
    def state(self) -> FrameState:
        return self.__state

    @property
    def slot(self) -> Slot[R]:
        return self.__slot

    @property
    def awaiting(self) -> Suspension[Any] | None:
        return self.__awaiting

    @property
    def produced(self) -> bool:
        """Whether the last step stopped at an element the body yielded."""
        return self.__produced

    @property
    def yielded(self) -> Any:
        return self.__yielded

    def done(self) -> bool:
        return self.__state is FrameState.DONE

    def resume(self) -> None:
        """Run the body up to its next suspension point.

        Does nothing once the frame is done.
        """
        match self.__state:
            case FrameState.DONE:
                return
            case FrameState.RUNNING:
                raise RuntimeError(f"Frame {self.name} is already running.")
            case FrameState.CLOSED:
                raise RuntimeError(f"Frame {self.name} has been closed.")

        self.__produced = False
        self.__yielded = None
        self.__state = FrameState.RUNNING
        try:
            self.__step()
        finally:
            if self.__state is FrameState.RUNNING:
                self.__state = FrameState.SUSPENDED

    def __step(self) -> None:
        body = cast(Generator[Any, None, R], self.__body)
        next_step: Callable[[], Any] = partial(body.send, None)

        if self.__awaiting is not None:
            try:
                self.__awaiting.step()
                ready = self.__awaiting.ready()
            except Exception as error:
                next_step = partial(body.throw, error)
            else:
                if not ready:
                    return
            self.__awaiting = None

        try:
            yielded = next_step()
        except StopIteration as stop:
            self.__finish()
            self.__slot.set_value(stop.value)
        except Exception as error:
            self.__finish()
            self.__slot.set_error(error)
        except BaseException as error:
            # Interrupts still leave the frame terminal, then keep unwinding.
            self.__finish()
            self.__slot.set_error(error)
            raise
        else:
            if isinstance(yielded, Suspension):
                self.__awaiting = yielded
            else:
                self.__produced = True
                self.__yielded = yielded

    def __finish(self) -> None:
        self.__state = FrameState.DONE
        logger.debug("Frame %s finished", self.name)

    def close(self) -> None:
        """Discard the body at whatever point it is paused."""
        if self.__state is FrameState.CLOSED:
            return
        if self.__state is not FrameState.DONE:
            logger.debug("Frame %s closed while %s", self.name, self.__state.value)
        self.__awaiting = None
        self.__state = FrameState.CLOSED
        self.__body.close()
