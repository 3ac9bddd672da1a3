from __future__ import annotations

import random
from datetime import datetime, timezone

from dashboard.models.market import Tick
from dashboard.session import TradingSession


def run(seconds: int = 120, initial_balance: float = 10_000.0) -> None:
    """
    Generates fake ticks for `seconds` seconds and feeds them into a TradingSession.

    - We simulate 1 tick per second.
    - Price does a random walk (moves up/down a bit each tick).
    - Every 30 ticks we try a trade (buy on even rounds, sell on odd ones)
      and print whether the ledger accepted it.
    """
    session = TradingSession(initial_balance=initial_balance)

    ts_ms = int(datetime.now(timezone.utc).replace(microsecond=0).timestamp() * 1000)
    price = 100.0

    print(f"Simulating {seconds} ticks, starting balance {initial_balance:.2f}...\n")

    for i in range(1, seconds + 1):
        price = max(0.01, price + random.uniform(-0.2, 0.2))
        session.on_tick(Tick(timestamp=ts_ms, price=round(price, 2)))

        if i % 30 == 0:
            shares = random.randint(1, 40)
            buying = (i // 30) % 2 == 1
            result = session.buy(shares) if buying else session.sell(shares)
            side = "BUY " if buying else "SELL"
            status = "ok" if result.accepted else f"rejected ({result.reason})"
            print(
                f"[{side}] {shares} @ {session.ledger.current_price} -> {status} "
                f"balance={result.ledger.balance:.2f} owned={result.ledger.owned_shares}"
            )

        ts_ms += 1000

    stats = session.stats.current
    ledger = session.ledger.ledger

    print("\nDone.")
    print(f"Ticks: {stats.count} mean={stats.mean:.4f} max={stats.max} min={stats.min}")
    print(f"Balance: {ledger.balance:.2f} owned={ledger.owned_shares} trades={len(ledger.log)}")


if __name__ == "__main__":
    run()
