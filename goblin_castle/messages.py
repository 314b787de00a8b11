"""A bounded log of game messages, each stamped with its turn."""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Deque, Iterator, Tuple


class MessageLog:
    """Keeps the most recent ``max_memory`` messages."""

    def __init__(self, max_memory: int) -> None:
        self._messages: Deque[Tuple[str, int]] = deque(maxlen=max_memory)
        self._turn = 0

    def append(self, msg: str) -> None:
        """Record a message for the current turn, dropping the oldest if full."""
        self._messages.append((str(msg), self._turn))

    def start_turn(self) -> None:
        self._turn += 1

    def latest(self, count: int) -> Iterator[Tuple[str, int]]:
        """Yield the last ``count`` messages, oldest first, with their age in turns."""
        recent = list(islice(reversed(self._messages), count))
        for msg, turn in reversed(recent):
            yield msg, self._turn - turn

    def peek(self, start: int, count: int) -> Iterator[str]:
        """Yield up to ``count`` messages beginning at position ``start``."""
        for msg, _ in islice(self._messages, start, start + count):
            yield msg

    def __len__(self) -> int:
        return len(self._messages)