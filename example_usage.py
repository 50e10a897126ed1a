import os
import time
import logging
import threading

import blocktimer
from blocktimer import BlockTimer, Config

logger = logging.getLogger(__name__)

def load_rows(timer: BlockTimer, count: int):
    with timer.block("load_rows", f"{count} rows"):
        for _ in range(count):
            time.sleep(0.001)
        timer.log("rows loaded")
        time.sleep(0.005)  # shows up as unaccounted

def worker(worker_id: int):
    # Per-thread timer, so nesting is not shared with other threads
    timer = BlockTimer(tag=f"BlockTimer.worker{worker_id}")
    timer.begin("job")
    load_rows(timer, 5 * (worker_id + 1))
    timer.begin("unfinished")
    timer.log("about to stop early")
    timer.end("job")

if __name__ == '__main__':
    config = Config(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.json'))
    config.setup_logging("blocktimer demo")

    timer = config.create_timer()
    timer.begin("demo")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    timer.log("workers joined")

    blocktimer.begin("shared")
    blocktimer.log("using the process-wide timer")
    blocktimer.end("shared")
    blocktimer.end()  # nothing left to end, logs a warning line

    timer.end("demo")
    logger.info("Demo finished")
