"""
Process-wide shared BlockTimer, reachable through module-level functions.

The shared timer is created lazily on first use. If the very first call is a
log() that is not preceded by begin(), it shows the time since that lazy
creation. This depends entirely on when the first call happens and is only
useful for showing how lazy it is, but it is left as is.
"""
import threading
from typing import Optional

from .timer import BlockTimer, _UNSET

_shared_timer: Optional[BlockTimer] = None
_shared_lock = threading.Lock()


def get_shared_timer() -> BlockTimer:
    """Return the shared timer, creating it on first use."""
    global _shared_timer
    if _shared_timer is None:
        with _shared_lock:
            if _shared_timer is None:
                _shared_timer = BlockTimer()
    return _shared_timer


def reset_shared_timer():
    """Drop the shared timer so the next call creates a fresh one."""
    global _shared_timer
    with _shared_lock:
        _shared_timer = None


def log(text: str):
    """Log a message on the shared timer. See BlockTimer.log."""
    get_shared_timer().log(text)


def begin(name: Optional[str], message: Optional[str] = None):
    """Begin a block on the shared timer. See BlockTimer.begin."""
    get_shared_timer().begin(name, message)


def end(name=_UNSET):
    """End a block on the shared timer. Prefer passing the block name."""
    get_shared_timer().end(name)


def block(name: Optional[str], message: Optional[str] = None):
    """Context manager timing a block on the shared timer."""
    return get_shared_timer().block(name, message)
