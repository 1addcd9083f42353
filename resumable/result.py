from dataclasses import dataclass
from typing import cast

from .errors import EmptyAccess


@dataclass
class Pending:
    pass


@dataclass
class Ok[T]:
    value: T


@dataclass
class Err[E: BaseException]:
    error: E


type Result[T, E: BaseException] = Ok[T] | Err[E]
type Outcome[T] = Pending | Result[T, BaseException]


class Slot[T]:
    """A single-give, single-take box for the outcome of a computation."""

    def __init__(self):
        self.__outcome: Outcome[T] = Pending()
        self.__taken = False

    def __repr__(self):
        return f"<{type(self).__name__} {self.__outcome!r}>"

    @property
    def outcome(self) -> Outcome[T]:
        return self.__outcome

    @property
    def ready(self) -> bool:
        return not isinstance(self.__outcome, Pending)

    @property
    def taken(self) -> bool:
        return self.__taken

    def set_value(self, value: T, /) -> None:
        self.__give(Ok(value))

    def set_error(self, error: BaseException, /) -> None:
        self.__give(Err(error))

    def __give(self, outcome: Result[T, BaseException]) -> None:
        if self.ready:
            raise RuntimeError("The result has already been set.")
        self.__outcome = outcome

    def take(self) -> T:
        """Give up the value, or raise the captured error.

        Only one take is allowed, whichever way the outcome went.
        """
        if not self.ready or self.__taken:
            raise EmptyAccess
        self.__taken = True
        outcome = cast(Result[T, BaseException], self.__outcome)
        if isinstance(outcome, Err):
            raise outcome.error
        return outcome.value
