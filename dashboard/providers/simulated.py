from __future__ import annotations

import asyncio
import json
import random
import time
from typing import AsyncIterator, Optional

from dashboard.providers.base import FeedProvider


class SimulatedFeedProvider(FeedProvider):
    """
    Offline feed for local development.

    Emits the same wire format as the real feed:
      {"timestamp": <epoch ms>, "price": <float>}

    - one message every `interval_seconds`
    - price does a random walk (moves up/down a bit each tick), floored at 0.01
    - `endpoint` is ignored
    """

    def __init__(
        self,
        start_price: float = 100.0,
        interval_seconds: float = 1.0,
        step: float = 0.2,
        seed: Optional[int] = None,
    ) -> None:
        self.start_price = start_price
        self.interval_seconds = interval_seconds
        self.step = step
        self._rng = random.Random(seed)

    async def stream_messages(self, endpoint: str) -> AsyncIterator[str]:
        price = self.start_price
        while True:
            price = max(0.01, price + self._rng.uniform(-self.step, self.step))
            yield json.dumps({"timestamp": int(time.time() * 1000), "price": round(price, 2)})
            await asyncio.sleep(self.interval_seconds)
