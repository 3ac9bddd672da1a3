from __future__ import annotations

import logging
from typing import Callable, List, Tuple

from dashboard.models.market import Tick

log = logging.getLogger("chart_feed")

Point = Tuple[int, float]
Renderer = Callable[[List[Point]], None]


class ChartFeed:
    """
    Ordered tick history for the chart.

    Renderers get the FULL list of (timestamp, price) pairs on every tick
    (replace-all, not incremental append). Arrival order is kept as-is: no
    sorting by timestamp and no deduplication.
    """

    def __init__(self) -> None:
        self.history: List[Tick] = []
        self._renderers: List[Renderer] = []

    def add_renderer(self, renderer: Renderer) -> None:
        if renderer not in self._renderers:
            self._renderers.append(renderer)

    def remove_renderer(self, renderer: Renderer) -> None:
        if renderer in self._renderers:
            self._renderers.remove(renderer)

    def clear(self) -> None:
        self.history = []

    def points(self) -> List[Point]:
        return [(t.timestamp, t.price) for t in self.history]

    def on_tick(self, tick: Tick) -> None:
        self.history.append(tick)

        for renderer in list(self._renderers):
            try:
                renderer(self.points())
            except Exception:
                log.exception("chart renderer failed renderer=%r", renderer)
