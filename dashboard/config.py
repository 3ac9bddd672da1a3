# dashboard/config.py
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Loads variables from a local .env file into environment variables (dev only).
load_dotenv()


@dataclass(frozen=True)
class Settings:
    # App config
    app_env: str
    log_level: str
    initial_balance: float

    # Feed config
    feed_provider: str
    feed_ws_url: str
    feed_ping_interval: float
    feed_ping_timeout: float

    # Simulated feed (dev only)
    sim_interval_seconds: float
    sim_start_price: float


def _env_float(name: str, default: str) -> float:
    raw = os.getenv(name, default).strip()
    try:
        return float(raw)
    except ValueError:
        raise RuntimeError(f"{name}={raw!r} is not a number. Fix it in .env") from None


def get_settings() -> Settings:
    """
    Reads env vars and returns a Settings object.
    """
    initial_balance = _env_float("INITIAL_BALANCE", "10000")
    if initial_balance < 0:
        raise RuntimeError("INITIAL_BALANCE must be >= 0")

    return Settings(
        app_env=os.getenv("APP_ENV", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        initial_balance=initial_balance,
        feed_provider=os.getenv("FEED_PROVIDER", "WEBSOCKET"),
        feed_ws_url=os.getenv("FEED_WS_URL", "ws://localhost:8082/ws"),
        feed_ping_interval=_env_float("FEED_PING_INTERVAL_SECONDS", "20"),
        feed_ping_timeout=_env_float("FEED_PING_TIMEOUT_SECONDS", "20"),
        sim_interval_seconds=_env_float("SIM_INTERVAL_SECONDS", "1.0"),
        sim_start_price=_env_float("SIM_START_PRICE", "100.0"),
    )
