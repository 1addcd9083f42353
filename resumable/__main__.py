from typing import Annotated

from typer import Option
from typer import Typer

from .config import load_config
from .gather import wait_all
from .gather import wait_any
from .log import configure_logging
from .sample import alternate
from .sample import countdown
from .sample import naturals

app = Typer()


@app.callback()
def main():
    """Run sample suspendable computations."""
    configure_logging(load_config().log_level)


@app.command()
def interleave(
    steps: Annotated[int, Option(help="Suspension points in each task.")] = 3,
):
    """Drive two eager tasks round-robin and show the order of their steps."""
    trace: list[str] = []
    first = alternate("a", steps, trace)
    second = alternate("b", steps, trace)
    wait_all(first, second)
    print(" ".join(trace))
    print(f"Results: {first.get()}, {second.get()}")


@app.command("naturals")
def naturals_command(
    count: Annotated[int, Option(help="How many elements to print.")] = 20,
):
    """Print the first elements of an endless generator."""
    iterator = naturals().begin()
    for _ in range(count):
        print(iterator.value)
        iterator.increment()


@app.command()
def race(
    short: Annotated[int, Option(help="Steps taken by the short task.")] = 2,
    long: Annotated[int, Option(help="Steps taken by the long task.")] = 5,
):
    """Drive two lazy tasks until one of them finishes."""
    tasks = countdown("short", short), countdown("long", long)
    winner = tasks[wait_any(*tasks)]
    print(f"Finished first: {winner.get()}")
    for pending in tasks:
        if pending and not pending.done():
            print(f"Still pending: {pending!r}")


if __name__ == "__main__":
    app()
