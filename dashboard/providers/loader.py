from dashboard.config import get_settings
from dashboard.providers.base import FeedProvider
from dashboard.providers.simulated import SimulatedFeedProvider
from dashboard.providers.websocket import WebSocketFeedProvider


def get_provider() -> FeedProvider:
    """
    Provider loader / factory.

    Reads FEED_PROVIDER from config and returns an instance of the selected provider.
    This is the single place that knows about concrete providers.
    """
    settings = get_settings()
    provider_name = settings.feed_provider.strip().upper()

    if provider_name == "WEBSOCKET":
        return WebSocketFeedProvider(
            ping_interval=settings.feed_ping_interval,
            ping_timeout=settings.feed_ping_timeout,
        )

    if provider_name == "SIMULATED":
        return SimulatedFeedProvider(
            start_price=settings.sim_start_price,
            interval_seconds=settings.sim_interval_seconds,
        )

    raise ValueError(
        f"Unknown FEED_PROVIDER='{settings.feed_provider}'. Expected: WEBSOCKET, SIMULATED"
    )
