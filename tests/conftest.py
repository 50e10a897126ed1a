import pytest

from blocktimer import BlockTimer


class FakeClock:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_ms(self, ms: float):
        self.now += int(ms * 1_000_000)


class RecordingSink:
    def __init__(self):
        self.records = []

    def __call__(self, tag: str, line: str):
        self.records.append((tag, line))

    @property
    def lines(self):
        return [line for _, line in self.records]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def timer(clock, sink):
    return BlockTimer(tag="test", sink=sink, clock=clock)
