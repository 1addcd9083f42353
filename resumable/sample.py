from .generator import generator
from .pause import pause
from .task import lazy_task
from .task import task


@task
def alternate(name: str, steps: int, trace: list[str]):
    for step in range(steps):
        trace.append(f"{name}{step}")
        yield
    trace.append(f"{name} done")
    return name


@generator
def naturals():
    i = 0
    while True:
        yield i
        i += 1


@lazy_task
async def countdown(name: str, steps: int):
    for _ in range(steps):
        await pause()
    return name


@task
async def total(count: int):
    """Sum the first elements of ``naturals``, pulling them cooperatively."""
    iterator = naturals().begin()
    result = 0
    for _ in range(count):
        result += iterator.take()
        await iterator.increment()
    return result
