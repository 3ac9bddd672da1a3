import logging

from fastapi import FastAPI

from dashboard.api.routes import router as api_router
from dashboard.config import get_settings
from dashboard.feed.source import TickSource
from dashboard.providers.loader import get_provider
from dashboard.state import session

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

provider = get_provider()
source = TickSource(provider)

app = FastAPI(title="Trading Dashboard API", version="0.1.0")
app.include_router(api_router)


@app.on_event("startup")
async def _startup():
    # Feed ingest: ticks -> stats, ledger price, chart history
    session.start(source, settings.feed_ws_url)


@app.on_event("shutdown")
async def _shutdown():
    session.stop()
    if session.handle is not None:
        await session.handle.wait_closed()


@app.get("/health")
def health():
    handle = session.handle
    return {
        "status": "ok",
        "app_env": settings.app_env,
        "provider_config": settings.feed_provider,
        "provider_loaded": provider.__class__.__name__,
        "feed_endpoint": settings.feed_ws_url,
        "feed_running": handle is not None and not handle.closed and not handle.done,
    }
