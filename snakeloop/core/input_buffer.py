# snakeloop/core/input_buffer.py
from __future__ import annotations
import threading
from typing import Hashable, List


class InputBuffer:
    """Raw key presses collected between frames.

    ``push`` may be called from any thread; ``drain_all`` swaps the pending
    list out under the same lock, so a key is seen by exactly one drain.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._keys: List[Hashable] = []

    def push(self, key: Hashable) -> None:
        with self._lock:
            self._keys.append(key)

    def drain_all(self) -> List[Hashable]:
        with self._lock:
            keys, self._keys = self._keys, []
        return keys

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)
