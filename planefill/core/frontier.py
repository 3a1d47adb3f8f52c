from __future__ import annotations

import logging

import numpy as np

from planefill.core.errors import FrontierUnderflow

logger = logging.getLogger(__name__)


class Frontier:
    """
    LIFO stack of (u, v) seeds waiting to be expanded.

    Seeds live in a preallocated int64 array that doubles when full.  Clearing
    only resets the top so the storage is reused by the next fill.
    """

    def __init__(self, capacity: int = 400):
        if capacity < 1:
            raise ValueError("Frontier capacity must be positive.")
        self._stack = np.empty((capacity, 2), dtype=np.int64)
        self._top = -1

    @property
    def capacity(self) -> int:
        return len(self._stack)

    def __len__(self):
        return self._top + 1

    def is_empty(self) -> bool:
        return self._top < 0

    def clear(self):
        self._top = -1

    def push(self, u: int, v: int):
        if self._top == len(self._stack) - 1:
            grown = np.empty((len(self._stack) * 2, 2), dtype=np.int64)
            grown[: len(self._stack)] = self._stack
            self._stack = grown
            logger.debug("Frontier grew to %d seeds", len(grown))
        self._top += 1
        self._stack[self._top, 0] = u
        self._stack[self._top, 1] = v

    def pop(self) -> tuple[int, int]:
        if self._top < 0:
            raise FrontierUnderflow("Can't pop from an empty frontier.")
        u, v = self._stack[self._top]
        self._top -= 1
        return int(u), int(v)
