from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from dashboard.ledger.engine import now_ms
from dashboard.models.ledger import TradeResult
from dashboard.models.market import RunningStats, Tick
from dashboard.models.views import (
    ChartView,
    LedgerEntryView,
    LedgerView,
    StatsView,
    TradeResponse,
)
from dashboard.session import TradingSession
from dashboard.state import get_session

router = APIRouter()


def stats_view(stats: RunningStats) -> StatsView:
    if stats.count == 0:
        return StatsView(count=0)
    return StatsView(count=stats.count, mean=stats.mean, max=stats.max, min=stats.min)


def ledger_view(session: TradingSession) -> LedgerView:
    ledger = session.ledger.ledger
    return LedgerView(
        balance=ledger.balance,
        owned_shares=ledger.owned_shares,
        current_price=session.ledger.current_price,
        log=[
            LedgerEntryView(
                operation=e.operation.value,
                timestamp=e.timestamp,
                shares=e.shares,
                price=e.price,
            )
            for e in ledger.log
        ],
    )


def trade_response(session: TradingSession, result: TradeResult) -> TradeResponse:
    return TradeResponse(
        accepted=result.accepted,
        reason=result.reason,
        ledger=ledger_view(session),
    )


@router.get("/stats", response_model=StatsView)
def get_stats(session: TradingSession = Depends(get_session)):
    return stats_view(session.stats.current)


@router.get("/ledger", response_model=LedgerView)
def get_ledger(session: TradingSession = Depends(get_session)):
    return ledger_view(session)


@router.get("/chart", response_model=ChartView)
def get_chart(session: TradingSession = Depends(get_session)):
    return ChartView(points=session.chart.points())


@router.post("/trade/buy", response_model=TradeResponse)
def buy(
    shares: int = Query(..., description="Whole shares to buy at the latest price"),
    session: TradingSession = Depends(get_session),
):
    """
    Rejections are not HTTP errors: they come back as accepted=false with
    the reason and the unchanged ledger.
    """
    return trade_response(session, session.buy(shares))


@router.post("/trade/sell", response_model=TradeResponse)
def sell(
    shares: int = Query(..., description="Whole shares to sell at the latest price"),
    session: TradingSession = Depends(get_session),
):
    return trade_response(session, session.sell(shares))


@router.post("/dev/simulate_tick")
def dev_simulate_tick(
    price: float = Query(..., description="Tick price"),
    timestamp: Optional[int] = Query(None, description="Epoch ms (defaults to now)"),
    session: TradingSession = Depends(get_session),
):
    """
    Dev-only helper:
    Feeds ONE tick into the running session, as if it came from the feed.
    """
    if timestamp is None:
        timestamp = now_ms()

    session.on_tick(Tick(timestamp=timestamp, price=price))
    return {"ok": True, "stats": stats_view(session.stats.current)}
