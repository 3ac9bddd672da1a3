from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple


class Operation(str, Enum):
    BUY = "Buy"
    SELL = "Sell"


@dataclass(frozen=True)
class LedgerEntry:
    """
    One accepted trade.

    timestamp: wall-clock epoch milliseconds when the trade was accepted
    price: price the trade was filled at (latest tick price)
    """
    operation: Operation
    timestamp: int
    shares: int
    price: float


@dataclass(frozen=True)
class Ledger:
    """
    Simulated trading account.

    Immutable value: every accepted trade produces a new Ledger whose log is
    the previous log plus one entry.
    """
    balance: float
    owned_shares: int = 0
    log: Tuple[LedgerEntry, ...] = field(default_factory=tuple)

    def append(self, entry: LedgerEntry, balance: float, owned_shares: int) -> "Ledger":
        return replace(self, balance=balance, owned_shares=owned_shares, log=self.log + (entry,))


@dataclass(frozen=True)
class TradeResult:
    accepted: bool
    ledger: Ledger
    reason: Optional[str] = None
