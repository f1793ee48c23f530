"""Timing log for product parsing.

```
from polymult.debug.logger import Logger
from polymult.product import parse_product

logger = Logger()
parse_product("(3x^3 + x^2 + 26x - 5)(x^2 + 4x)(x^16 - 12x^9 + -2)", logger=logger)

logger.dump()   # dumps information into polymult_log.txt
```
"""

import time
from typing import List, NamedTuple

from ..polynomial import Polynomial


class Datum(NamedTuple):
    text: str
    time_spent: float
    result: Polynomial


class Logger:
    """Keeps track of time spent on each factor of a product (parsing it + multiplying it in).

    One entry per factor in the order they were multiplied in, so repeated factors each get their own.
    """

    _data: List[Datum] = None

    def __init__(self):
        self._data = []

    def log(self, text: str, time_spent: float, result: Polynomial):
        """Log a factor.

        text: the factor, without its parentheses
        time_spent: time taken to parse and multiply it in, in seconds
        result: the running product after it was multiplied in
        """
        self._data.append(Datum(text, time_spent, result))

    @property
    def data(self) -> List[Datum]:
        return self._data

    def sort(self):
        """sorts the data by time spent on each factor, from most time to least time."""
        self._data.sort(key=lambda x: x.time_spent, reverse=True)

    def dump(self, path: str = "polymult_log.txt"):
        self.sort()

        with open(path, "w") as f:
            f.write("Factor: time taken (s)")
            f.write("\n\n")
            for v in self._data:
                f.write(f"{v.text}: {v.time_spent}\n")

            if self._data:
                slowest = self._data[0]
                f.write("\n\n\n")
                f.write("Running product after the factor with most time spent: \n")
                f.write(f"{slowest.result}\n")


def log_time(logger: Logger, text: str, func, *args, **kwargs):
    """Call func, log how long it took under text if there's a logger, and return the result."""
    start = time.time()
    result = func(*args, **kwargs)
    if logger is not None:
        logger.log(text, time.time() - start, result)
    return result
