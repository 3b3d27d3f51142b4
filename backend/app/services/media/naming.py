"""
Filename generation for ingested media.

Names are a nanosecond timestamp followed by an extension. The timestamp is
forced to be strictly increasing within the process, so two ingestions that
read the same clock value still get different names.
"""
import threading
import time
from typing import Callable


class FilenameGenerator:
    def __init__(self, clock: Callable[[], int] = time.time_ns):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_name(self, extension: str) -> str:
        with self._lock:
            stamp = max(self._clock(), self._last + 1)
            self._last = stamp
        return f"{stamp}{extension}"


filename_generator = FilenameGenerator()
