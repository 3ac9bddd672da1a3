from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from dashboard.errors import (
    InsufficientFunds,
    InsufficientShares,
    InvalidShareCount,
    NoPriceAvailable,
    TradeRejected,
)
from dashboard.models.ledger import Ledger, LedgerEntry, Operation, TradeResult
from dashboard.models.market import Tick

log = logging.getLogger("trade_ledger")


def now_ms() -> int:
    return int(time.time() * 1000)


def _check_shares(shares: int) -> None:
    # bool is an int subclass; True is not "one share"
    if isinstance(shares, bool) or not isinstance(shares, int):
        raise InvalidShareCount(f"share count must be an integer, got {shares!r}")
    if shares <= 0:
        raise InvalidShareCount(f"share count must be positive, got {shares}")


def apply_buy(ledger: Ledger, shares: int, price: float, timestamp: int) -> Ledger:
    """
    Buy `shares` at `price`.

    Accepted only when the cost is strictly below the balance: spending the
    whole remaining balance is rejected.
    """
    _check_shares(shares)
    cost = shares * price
    if not cost < ledger.balance:
        raise InsufficientFunds(
            f"cost {cost:.2f} for {shares} @ {price} is not below balance {ledger.balance:.2f}"
        )

    entry = LedgerEntry(operation=Operation.BUY, timestamp=timestamp, shares=shares, price=price)
    return ledger.append(
        entry,
        balance=ledger.balance - cost,
        owned_shares=ledger.owned_shares + shares,
    )


def apply_sell(ledger: Ledger, shares: int, price: float, timestamp: int) -> Ledger:
    """Sell `shares` at `price`. Accepted only when enough shares are held."""
    _check_shares(shares)
    if shares > ledger.owned_shares:
        raise InsufficientShares(f"cannot sell {shares}, only {ledger.owned_shares} owned")

    entry = LedgerEntry(operation=Operation.SELL, timestamp=timestamp, shares=shares, price=price)
    return ledger.append(
        entry,
        balance=ledger.balance + shares * price,
        owned_shares=ledger.owned_shares - shares,
    )


class TradeLedger:
    """
    Session-scoped owner of the Ledger.

    - observe_price(): tick subscriber that tracks the latest price
    - buy()/sell(): viewer actions evaluated against that price

    Rejections never raise: they are logged and returned as
    TradeResult(accepted=False) with the ledger untouched.
    """

    def __init__(self, initial_balance: float, clock: Optional[Callable[[], int]] = None):
        self.ledger = Ledger(balance=float(initial_balance))
        self.current_price: Optional[float] = None
        self._clock = clock or now_ms

    def observe_price(self, tick: Tick) -> None:
        self.current_price = tick.price

    def buy(self, shares: int) -> TradeResult:
        return self._execute(Operation.BUY, shares)

    def sell(self, shares: int) -> TradeResult:
        return self._execute(Operation.SELL, shares)

    def _execute(self, operation: Operation, shares: int) -> TradeResult:
        transition = apply_buy if operation is Operation.BUY else apply_sell
        try:
            if self.current_price is None:
                raise NoPriceAvailable("no tick received yet")
            self.ledger = transition(self.ledger, shares, self.current_price, self._clock())
        except TradeRejected as e:
            log.warning(
                "%s rejected shares=%r reason=%s: %s",
                operation.value, shares, type(e).__name__, e,
            )
            return TradeResult(accepted=False, ledger=self.ledger, reason=type(e).__name__)

        log.info(
            "%s accepted shares=%d price=%s balance=%.2f owned=%d",
            operation.value, shares, self.current_price,
            self.ledger.balance, self.ledger.owned_shares,
        )
        return TradeResult(accepted=True, ledger=self.ledger)
