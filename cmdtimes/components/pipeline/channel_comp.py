"""
Closable hand-off channel between pipeline stages.

A thin layer over queue.Queue that adds close semantics: after close(),
receivers drain every item sent before the close and then stop, and further
sends are rejected. Any number of threads may send or receive concurrently.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

# Default capacity; queue.Queue has no zero-capacity (rendezvous) mode
DEFAULT_CAPACITY = 1


class ChannelClosedError(RuntimeError):
    """Raised when sending on, or closing, an already closed channel."""


class _Closed:
    """Sentinel marking the end of a channel's stream."""

    def __repr__(self) -> str:
        return "<closed>"


_CLOSED = _Closed()


class Channel(Generic[T]):
    """
    Bounded, closable FIFO channel.

    Usage:
        lines: Channel[str] = Channel(name="lines")
        # producer
        lines.send("build -> 1s")
        lines.close()
        # consumer(s)
        for line in lines:
            ...
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, name: str = "channel"):
        """
        Args:
            capacity: Maximum number of buffered items (>= 1)
            name: Channel name for logging and error messages
        """
        if capacity < 1:
            raise ValueError(f"channel capacity must be >= 1, got {capacity}")
        self.name = name
        self._queue: queue.Queue[T | _Closed] = queue.Queue(maxsize=capacity)
        # Guards _closed and _in_flight; never held across a blocking put
        self._state = threading.Condition()
        self._closed = False
        self._in_flight = 0

    def send(self, item: T) -> None:
        """
        Hand an item to the next receiver, blocking while the channel is full.

        Raises:
            ChannelClosedError: If the channel has been closed
        """
        with self._state:
            if self._closed:
                raise ChannelClosedError(f"send on closed channel '{self.name}'")
            self._in_flight += 1
        try:
            self._queue.put(item)
        finally:
            with self._state:
                self._in_flight -= 1
                if not self._in_flight:
                    self._state.notify_all()

    def close(self) -> None:
        """
        Close the channel.

        New sends are rejected immediately. Sends already in progress still
        deliver their items; the end-of-stream marker is queued after them, so
        receivers drain every item before they stop.

        Raises:
            ChannelClosedError: If the channel is already closed
        """
        with self._state:
            if self._closed:
                raise ChannelClosedError(f"close of closed channel '{self.name}'")
            self._closed = True
            self._state.wait_for(lambda: self._in_flight == 0)
        self._queue.put(_CLOSED)

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> Iterator[T]:
        """Receive items until the channel is closed and drained."""
        while True:
            item = self._queue.get()
            if isinstance(item, _Closed):
                # Put the sentinel back so every other receiver also stops
                self._queue.put(item)
                return
            yield item
