from .errors import EmptyAccess as EmptyAccess
from .errors import InvalidIncrement as InvalidIncrement
from .gather import wait_all as wait_all
from .gather import wait_any as wait_any
from .generator import Advance as Advance
from .generator import Generator as Generator
from .generator import Iterator as Iterator
from .generator import generator as generator
from .pause import pause as pause
from .suspension import Suspension as Suspension
from .task import BasicTask as BasicTask
from .task import LazyTask as LazyTask
from .task import Task as Task
from .task import lazy_task as lazy_task
from .task import task as task
