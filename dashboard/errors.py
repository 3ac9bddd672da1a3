from __future__ import annotations


class DashboardError(Exception):
    """Base class for every recoverable error raised by the dashboard core."""


class DecodeError(DashboardError):
    """A feed message could not be decoded into a Tick."""


class TradeRejected(DashboardError):
    """
    A buy/sell request failed its precondition.

    Raised by the pure ledger transitions only. TradeLedger catches it and
    reports a rejected TradeResult instead of propagating it.
    """


class InvalidShareCount(TradeRejected):
    pass


class NoPriceAvailable(TradeRejected):
    pass


class InsufficientFunds(TradeRejected):
    pass


class InsufficientShares(TradeRejected):
    pass
