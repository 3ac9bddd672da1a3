from __future__ import annotations

import logging
from typing import AsyncIterator, Union

import websockets
from websockets.exceptions import WebSocketException

from dashboard.providers.base import FeedProvider

log = logging.getLogger("websocket_provider")


class WebSocketFeedProvider(FeedProvider):
    """
    WebSocket feed provider.

    Inbound only: connects, yields every message, never sends.
    Transport failures end the stream (logged, not raised). There is no
    retry; the caller sees the stream simply stop.
    """

    def __init__(self, ping_interval: float = 20.0, ping_timeout: float = 20.0) -> None:
        self.ping_interval = ping_interval
        self.ping_timeout = ping_timeout

    async def stream_messages(self, endpoint: str) -> AsyncIterator[Union[str, bytes]]:
        try:
            async with websockets.connect(
                endpoint,
                ping_interval=self.ping_interval,
                ping_timeout=self.ping_timeout,
            ) as ws:
                log.warning("feed WS connected endpoint=%s", endpoint)
                async for raw in ws:
                    yield raw
        except (WebSocketException, OSError) as e:
            log.warning("feed WS error endpoint=%s: %s", endpoint, e)
            return

        log.warning("feed WS closed by server endpoint=%s", endpoint)
