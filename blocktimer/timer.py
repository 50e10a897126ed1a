"""
BlockTimer measures and logs elapsed time across nested, named blocks of code.

Basic internal behaviour:
- logging sets the 'last time' value on the frame at the top of the stack.
- beginning a block pushes a new frame onto the stack.
- ending a block pops the top frame, and updates the new top's 'last time' so
  later logs are measured from the end of the block.
- 'unaccounted' time is the time between the last log and the end of a block,
  which points at costly work that has no finer-grained log statements.

Does have demo code at the bottom of the file.
"""
import time
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from .constants import DEFAULT_TAG, Indent, Threshold, TimerMessage
from .sinks import Sink, logging_sink

_UNSET = object()


def format_duration(nanos: int) -> str:
    """Render a nanosecond duration, e.g. "5 ms" or "0.23 ms".

    Durations of 10ms or more are shown as whole (truncated) milliseconds.
    """
    if nanos >= Threshold.WHOLE_MS_NANOS.value:
        return f"{nanos // Threshold.NANOS_PER_MS.value} ms"
    return f"{nanos / Threshold.NANOS_PER_MS.value:.2f} ms"


def elapsed(start: int, now: int) -> str:
    """Time since start, padded for easy appending, e.g. " 5 ms"."""
    return " " + format_duration(now - start)


def unaccounted(start: int, last: int, now: int) -> str:
    """Time since the last log inside a block, or "" if nothing was logged in it."""
    if start == last:
        return ""
    return f" ({TimerMessage.UNACCOUNTED.value}: {format_duration(now - last)})"


class BlockFrame:
    """One active timed block."""

    def __init__(self, name: Optional[str], time_ns: int):
        self.name = name
        self.start_time = time_ns
        self.last_time = time_ns

    def __str__(self):
        return TimerMessage.NO_NAME.value if self.name is None else self.name

    def __repr__(self):
        return f"BlockFrame({self.name!r}, start={self.start_time}, last={self.last_time})"


class BlockTimer:
    """Stack of nested timed blocks that writes one indented line per event."""

    def __init__(
        self,
        tag: str = DEFAULT_TAG,
        sink: Optional[Sink] = None,
        clock: Callable[[], int] = time.perf_counter_ns
    ):
        """Create a timer.

        Args:
            tag (str): Label attached to every emitted line
            sink (Optional[Sink]): Receives (tag, line). If None, lines go to the
                                   logger named by the tag at debug level.
            clock (Callable[[], int]): Monotonic clock in nanoseconds
        """
        self._tag = tag
        self._sink = logging_sink if sink is None else sink
        self._clock = clock
        self._lock = threading.RLock()
        # The root frame keeps the stack non-empty and is never popped or shown.
        self._times: List[BlockFrame] = [BlockFrame(None, self._clock())]

    @classmethod
    def from_config(cls, timer_config, sink: Optional[Sink] = None) -> "BlockTimer":
        """Build a timer from a TimerConfig."""
        return cls(tag=timer_config.tag, sink=sink)

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def depth(self) -> int:
        """Number of open blocks, not counting the root."""
        with self._lock:
            return len(self._times) - 1

    def names(self) -> List[str]:
        """Names of the open blocks, outermost first."""
        with self._lock:
            return [str(frame) for frame in self._times[1:]]

    def log(self, text: str):
        """Log a message with the time elapsed since the last log in this block."""
        with self._lock:
            now = self._clock()
            top = self._times[-1]
            self._emit(text + elapsed(top.last_time, now))
            top.last_time = now

    def begin(self, name: Optional[str], message: Optional[str] = None):
        """Begin a named block. Logs inside it are indented until it ends.

        Args:
            name: Name of the block
            message: Extra text to display, not part of the block name
        """
        with self._lock:
            now = self._clock()
            line = TimerMessage.BEGINNING.value
            if name is not None:
                line += " " + name
            if message is not None:
                line += ": " + message
            self._emit(line + elapsed(self._times[-1].last_time, now))
            self._times.append(BlockFrame(name, now))

    def end(self, name=_UNSET):
        """End a block, logging its run time and any unaccounted time.

        Without a name the innermost block is ended. With a name, any blocks
        opened inside the named one are force-ended first. An unknown name is
        logged and changes nothing, which makes the named form the safer one.
        """
        with self._lock:
            if name is _UNSET:
                self._end_top()
            else:
                self._end_named(name)

    @contextmanager
    def block(self, name: Optional[str], message: Optional[str] = None) -> Iterator["BlockTimer"]:
        """Time the enclosed code as a named block."""
        self.begin(name, message)
        try:
            yield self
        finally:
            self.end(name)

    def _end_top(self):
        now = self._clock()
        if len(self._times) == 1:
            self.log(TimerMessage.ALREADY_AT_BOTTOM.value)
            return
        frame = self._times.pop()
        block_name = "" if frame.name is None else " " + frame.name
        self._emit(
            TimerMessage.ENDED.value + block_name
            + elapsed(frame.start_time, now)
            + unaccounted(frame.start_time, frame.last_time, now)
        )
        self._times[-1].last_time = now

    def _end_named(self, name: Optional[str]):
        height = 0
        found = False
        for frame in reversed(self._times[1:]):
            height += 1
            if frame.name == name:
                found = True
                break

        if not found:
            self.log(f"{TimerMessage.UNKNOWN_END.value}: {name}")
            return

        while height > 0:
            height -= 1
            if height > 0:
                # no timing here, the skipped time shows up as unaccounted instead
                self._emit(TimerMessage.FORCED_END.value)
            self._end_top()

    def _emit(self, text: str):
        self._sink(self._tag, self._pad() + text)

    def _pad(self) -> str:
        return Indent.LEVEL.value * (len(self._times) - 1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(message)s")
    timer = BlockTimer()
    timer.begin("main", "demo run")
    timer.log("started")
    with timer.block("sleep"):
        time.sleep(0.02)
    timer.end("main")
