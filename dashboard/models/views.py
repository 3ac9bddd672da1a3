from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel


class StatsView(BaseModel):
    """
    RunningStats as served over HTTP.

    mean/max/min are None until the first tick arrives, because JSON has no
    representation for the infinities RunningStats starts with.
    """

    count: int
    mean: Optional[float] = None
    max: Optional[float] = None
    min: Optional[float] = None


class LedgerEntryView(BaseModel):
    operation: str
    timestamp: int
    shares: int
    price: float


class LedgerView(BaseModel):
    balance: float
    owned_shares: int
    current_price: Optional[float] = None
    log: List[LedgerEntryView] = []


class TradeResponse(BaseModel):
    accepted: bool
    reason: Optional[str] = None
    ledger: LedgerView


class ChartView(BaseModel):
    points: List[Tuple[int, float]] = []
