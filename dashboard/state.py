from dashboard.config import get_settings
from dashboard.session import TradingSession

# Session for the running API process (one viewer, no persistence)
session = TradingSession(initial_balance=get_settings().initial_balance)


def get_session() -> TradingSession:
    return session
