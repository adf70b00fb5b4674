"""Settle-once broadcast future.

A BroadcastFuture holds the single outcome of one operation and hands it to
every attachment, including attachments made after it settled. Attaching
never re-runs the operation, and cancelling an attachment never cancels the
source.

Usage:
    broadcast = BroadcastFuture()
    first = broadcast.attach(lambda bundle: bundle["core"]["firstname"])
    broadcast.set_result({"core": {"firstname": "Hello"}})
    late = broadcast.attach(len)  # replays the same bundle
"""

import asyncio
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def _mark_retrieved(future: asyncio.Future) -> None:
    # A rejection nobody attached to would otherwise be reported by the loop
    if not future.cancelled():
        future.exception()


class BroadcastFuture(Generic[T]):
    """Fan-out of a single resolved or rejected value.

    Must be created while an event loop is running, or with an explicit loop.

    Attributes:
        attachments: Number of derived futures created so far.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop or asyncio.get_running_loop()
        self._future: asyncio.Future = self._loop.create_future()
        self._future.add_done_callback(_mark_retrieved)
        self.attachments = 0

    @property
    def settled(self) -> bool:
        return self._future.done()

    def set_result(self, value: T) -> None:
        """Resolve the future.

        Raises:
            asyncio.InvalidStateError: If already settled.
        """
        self._future.set_result(value)

    def set_exception(self, exc: BaseException) -> None:
        """Reject the future.

        Raises:
            asyncio.InvalidStateError: If already settled.
        """
        self._future.set_exception(exc)

    def result(self) -> T:
        """Return the resolved value, or raise the rejection."""
        return self._future.result()

    def exception(self) -> Optional[BaseException]:
        return self._future.exception()

    def attach(self, projection: Callable[[T], R]) -> "asyncio.Future[R]":
        """Derive a future from the eventual value.

        The projection runs once the source settles, or on the next loop
        iteration when it already has. A rejection is relayed unchanged and
        an exception raised by the projection rejects only the derived
        future.

        Args:
            projection: Function applied to the resolved value.

        Returns:
            Future carrying the projected value.
        """
        derived = self._loop.create_future()
        self.attachments += 1

        def _relay(source: asyncio.Future) -> None:
            if derived.done():
                # cancelled by its owner
                return
            if source.cancelled():
                derived.cancel()
                return
            exc = source.exception()
            if exc is not None:
                derived.set_exception(exc)
                return
            try:
                value = projection(source.result())
            except Exception as e:  # pylint: disable=broad-except
                derived.set_exception(e)
                return
            derived.set_result(value)

        self._future.add_done_callback(_relay)
        return derived

    async def wait(self) -> T:
        """Wait for the value without exposing the source to cancellation."""
        return await asyncio.shield(self._future)

    def __await__(self):
        return self.wait().__await__()

    def __repr__(self) -> str:
        if not self._future.done():
            state = "pending"
        elif self._future.cancelled():
            state = "cancelled"
        elif self._future.exception() is not None:
            state = "rejected"
        else:
            state = "resolved"
        return f"<BroadcastFuture {state} attachments={self.attachments}>"
