from dataclasses import dataclass
from dataclasses import field

from .suspension import Suspension


@dataclass(eq=False, kw_only=True)
class Pause(Suspension[None]):
    """A single suspension point, ready after being stepped once."""

    stepped: bool = field(default=False, init=False)

    def ready(self) -> bool:
        return self.stepped

    def step(self) -> None:
        self.stepped = True

    def result(self) -> None:
        return None


def pause() -> Pause:
    return Pause()
