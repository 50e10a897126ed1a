import logging
from typing import Callable

# A sink accepts (tag, line) and writes the line somewhere.
Sink = Callable[[str, str], None]


def logging_sink(tag: str, line: str) -> None:
    """Write a timer line to the logger named by the tag at debug level."""
    logging.getLogger(tag).debug(line)
