from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tick:
    """
    Tick = a single price observation from the feed.

    timestamp: producer-assigned epoch milliseconds (not guaranteed monotonic)
    price: observed price
    """
    timestamp: int
    price: float


@dataclass(frozen=True)
class RunningStats:
    """
    Running statistics over every tick seen since the stream opened.

    count: number of ticks folded in
    mean: arithmetic mean of prices (0.0 while count == 0)
    max/min: extremes so far (-inf / +inf while count == 0)
    """
    count: int = 0
    mean: float = 0.0
    max: float = float("-inf")
    min: float = float("inf")
