# -*- coding: utf-8 -*-
"""
Windowed byte-reversing decorator for a random generator.

Bytes are pulled from the underlying generator one window at a time and
handed out last byte first. A partly used window carries over to the next
``next_bytes`` call; adding seed material discards it.

Access to internals is serialized with a lock so a single instance can be
shared between threads.
"""

from __future__ import annotations

import threading
from typing import Optional

from ..errors import InvalidParameterError
from .base import RandomGenerator, SeedMaterial, check_region


class ReversedWindowGenerator(RandomGenerator):

    def __init__(self, generator: RandomGenerator, window_size: int):
        if generator is None:
            raise InvalidParameterError("generator must not be None")
        if window_size < 2:
            raise InvalidParameterError("Window size must be at least 2")
        self._generator = generator
        self._window = bytearray(window_size)
        self._window_count = 0
        self._lock = threading.Lock()

    @property
    def window_size(self) -> int:
        return len(self._window)

    def add_seed_material(self, seed: SeedMaterial) -> None:
        with self._lock:
            self._window_count = 0
            self._generator.add_seed_material(seed)

    def next_bytes(self, buf: bytearray, start: int = 0, length: Optional[int] = None) -> None:
        length = check_region(buf, start, length)
        with self._lock:
            for i in range(start, start + length):
                if self._window_count < 1:
                    self._generator.next_bytes(self._window, 0, len(self._window))
                    self._window_count = len(self._window)
                self._window_count -= 1
                buf[i] = self._window[self._window_count]
