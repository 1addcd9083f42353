from .task import BasicTask


def wait_all(*tasks: BasicTask) -> None:
    """Resume every unfinished task in turn until all of them are done.

    No task is consumed; get each result afterward with ``wait``.
    """
    if not tasks:
        raise ValueError("wait_all needs at least one task.")
    while not all(task.done() for task in tasks):
        for task in tasks:
            if not task.done():
                task.resume()


def wait_any(*tasks: BasicTask) -> int:
    """Resume every unfinished task in turn until any of them is done.

    Returns the position of the first finished task. The others are left
    suspended where they were.
    """
    if not tasks:
        raise ValueError("wait_any needs at least one task.")
    while True:
        for index, task in enumerate(tasks):
            if task.done():
                return index
        for task in tasks:
            task.resume()
