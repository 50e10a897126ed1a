import logging
import threading

import pytest

import blocktimer
from blocktimer import shared
from blocktimer.constants import DEFAULT_TAG


@pytest.fixture(autouse=True)
def fresh_shared_timer():
    shared.reset_shared_timer()
    yield
    shared.reset_shared_timer()


def test_shared_timer_is_created_once():
    seen = []

    def grab():
        seen.append(shared.get_shared_timer())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == 8
    assert all(timer is seen[0] for timer in seen)
    assert seen[0].tag == DEFAULT_TAG


def test_reset_creates_new_timer():
    first = shared.get_shared_timer()
    shared.reset_shared_timer()
    assert shared.get_shared_timer() is not first


def test_module_functions_delegate_to_shared_timer(caplog):
    with caplog.at_level(logging.DEBUG, logger=DEFAULT_TAG):
        blocktimer.begin("outer", "via facade")
        blocktimer.log("step")
        blocktimer.begin("inner")
        blocktimer.end("outer")
        blocktimer.end()

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0].startswith("Beginning outer: via facade ")
    assert messages[1].startswith("  step ")
    assert messages[3] == "    <forced end, run time inaccurate>"
    assert messages[4].startswith("  Ended inner ")
    assert messages[5].startswith("Ended outer ")
    assert messages[6].startswith("!!! Could not end, already at bottom !!!")
    assert shared.get_shared_timer().depth == 0


def test_shared_block_context_manager():
    with blocktimer.block("shared-block"):
        assert shared.get_shared_timer().names() == ["shared-block"]
    assert shared.get_shared_timer().depth == 0
