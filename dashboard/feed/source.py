from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional, Union

from dashboard.errors import DecodeError
from dashboard.feed.decoder import decode_tick
from dashboard.models.market import Tick
from dashboard.providers.base import FeedProvider

log = logging.getLogger("tick_source")

TickSubscriber = Callable[[Tick], None]


class FeedHandle:
    """
    Handle for one open feed connection.

    close() is the only way to cancel the feed. Once it returns no further
    tick is delivered, even if messages were already buffered.
    """

    def __init__(self, endpoint: str) -> None:
        self.endpoint = endpoint
        self.closed = False
        self._task: Optional[asyncio.Task] = None

    @property
    def done(self) -> bool:
        return self._task is not None and self._task.done()

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._task is not None and not self._task.done():
            self._task.cancel()
        log.info("feed closed endpoint=%s", self.endpoint)

    async def wait_closed(self) -> None:
        """Wait for the pump task to finish (after close() or when the stream ends)."""
        if self._task is None:
            return
        # asyncio.wait never raises the task's own exception or cancellation
        await asyncio.wait({self._task})


class TickSource:
    """
    Reads raw messages from a FeedProvider, decodes them and publishes Ticks.

    - malformed messages are logged and dropped; the stream keeps going
    - subscribers are called synchronously, in registration order
    - no reconnect: when the provider stream ends, the source stops
    """

    def __init__(self, provider: FeedProvider) -> None:
        self.provider = provider
        self._subscribers: List[TickSubscriber] = []

    def subscribe(self, subscriber: TickSubscriber) -> None:
        if subscriber not in self._subscribers:
            self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: TickSubscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    def connect(self, endpoint: str) -> FeedHandle:
        """Start pumping `endpoint` in a background task. Needs a running event loop."""
        handle = FeedHandle(endpoint)
        handle._task = asyncio.get_running_loop().create_task(self._pump(endpoint, handle))
        return handle

    def on_message(self, raw: Union[str, bytes]) -> Optional[Tick]:
        """Decode one raw message and publish it. Returns None if it was dropped."""
        try:
            tick = decode_tick(raw)
        except DecodeError as e:
            log.warning("dropping malformed feed message: %s raw=%.200r", e, raw)
            return None

        self.publish(tick)
        return tick

    def publish(self, tick: Tick) -> None:
        for subscriber in list(self._subscribers):
            try:
                subscriber(tick)
            except Exception:
                log.exception("tick subscriber failed subscriber=%r tick=%s", subscriber, tick)

    async def _pump(self, endpoint: str, handle: FeedHandle) -> None:
        stream = self.provider.stream_messages(endpoint)
        try:
            async for raw in stream:
                if handle.closed:
                    break
                self.on_message(raw)
        except Exception:
            log.exception("feed stream failed endpoint=%s", endpoint)
        finally:
            aclose = getattr(stream, "aclose", None)
            if callable(aclose):
                await aclose()

        if not handle.closed:
            log.warning("feed stream ended endpoint=%s (no reconnect)", endpoint)
