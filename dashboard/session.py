from __future__ import annotations

import logging
from typing import Callable, Optional

from dashboard.chart.feed import ChartFeed
from dashboard.feed.source import FeedHandle, TickSource
from dashboard.ledger.engine import TradeLedger
from dashboard.models.ledger import TradeResult
from dashboard.models.market import Tick
from dashboard.stats.engine import StatsEngine

log = logging.getLogger("trading_session")


class TradingSession:
    """
    One viewer session: stats + ledger + chart history, fed by one TickSource.

    Stats and chart history restart with every start(); the ledger is kept
    for the whole session.

    Every tick is applied in the same order: stats, then the ledger's latest
    price, then the chart. Buy/sell requests come in independently.
    """

    def __init__(self, initial_balance: float, clock: Optional[Callable[[], int]] = None):
        self.stats = StatsEngine()
        self.ledger = TradeLedger(initial_balance, clock=clock)
        self.chart = ChartFeed()

        self.handle: Optional[FeedHandle] = None
        self._source: Optional[TickSource] = None

    def on_tick(self, tick: Tick) -> None:
        self.stats.observe(tick)
        self.ledger.observe_price(tick)
        self.chart.on_tick(tick)

    def start(self, source: TickSource, endpoint: str) -> FeedHandle:
        if self.handle is not None and not self.handle.closed and not self.handle.done:
            raise RuntimeError(f"session already connected to {self.handle.endpoint}")

        if self._source is not None:
            self._source.unsubscribe(self.on_tick)
        self.stats.reset()
        self.chart.clear()

        self._source = source
        source.subscribe(self.on_tick)
        self.handle = source.connect(endpoint)
        log.info("session started endpoint=%s", endpoint)
        return self.handle

    def stop(self) -> None:
        if self.handle is not None:
            self.handle.close()
        if self._source is not None:
            self._source.unsubscribe(self.on_tick)
            self._source = None

    def buy(self, shares: int) -> TradeResult:
        return self.ledger.buy(shares)

    def sell(self, shares: int) -> TradeResult:
        return self.ledger.sell(shares)
