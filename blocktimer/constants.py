from enum import Enum

DEFAULT_TAG = "BlockTimer"

class Indent(str, Enum):
    LEVEL = "  "

class Threshold(int, Enum):
    NANOS_PER_MS = 1_000_000
    WHOLE_MS_NANOS = 10 * 1_000_000

class TimerMessage(str, Enum):
    BEGINNING = "Beginning"
    ENDED = "Ended"
    UNACCOUNTED = "unaccounted"
    FORCED_END = "<forced end, run time inaccurate>"
    ALREADY_AT_BOTTOM = "!!! Could not end, already at bottom !!!"
    UNKNOWN_END = "Unknown end"
    NO_NAME = "<no name>"
