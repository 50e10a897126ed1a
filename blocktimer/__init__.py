"""
BlockTimer: quick, human-readable timing breadcrumbs for nested blocks of code.
Use the module-level functions for a process-wide shared timer, or create your
own BlockTimer (pass a tag) for finer-grained use such as per-thread timing.
"""

from .config import Config, TimerConfig
from .logger import Logger
from .shared import begin, block, end, get_shared_timer, log, reset_shared_timer
from .sinks import Sink, logging_sink
from .timer import BlockFrame, BlockTimer, format_duration

__all__ = [
    'BlockTimer', 'BlockFrame', 'format_duration',
    'Sink', 'logging_sink',
    'Config', 'TimerConfig', 'Logger',
    'log', 'begin', 'end', 'block', 'get_shared_timer', 'reset_shared_timer',
]
