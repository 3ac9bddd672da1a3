from __future__ import annotations

from typing import Iterable

from dashboard.models.market import RunningStats, Tick


def update_stats(stats: RunningStats, price: float) -> RunningStats:
    """Fold one price into the running stats (O(1), incremental mean)."""
    count = stats.count + 1
    return RunningStats(
        count=count,
        mean=stats.mean + (price - stats.mean) / count,
        max=max(stats.max, price),
        min=min(stats.min, price),
    )


def replay(ticks: Iterable[Tick]) -> RunningStats:
    """Rebuild stats from scratch by folding ticks in arrival order."""
    stats = RunningStats()
    for tick in ticks:
        stats = update_stats(stats, tick.price)
    return stats


class StatsEngine:
    """
    Holds the current RunningStats for one stream.

    observe() replaces the held value on every tick; nothing else is kept,
    so memory stays constant however long the stream runs.
    """

    def __init__(self) -> None:
        self.current = RunningStats()

    def observe(self, tick: Tick) -> RunningStats:
        self.current = update_stats(self.current, tick.price)
        return self.current

    def reset(self) -> None:
        self.current = RunningStats()
