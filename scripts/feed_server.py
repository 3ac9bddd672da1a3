import argparse
import asyncio
import logging

import websockets

from dashboard.providers.simulated import SimulatedFeedProvider

log = logging.getLogger("feed_server")

clients = set()


async def handler(ws):
    clients.add(ws)
    log.warning("client connected remote=%s clients=%d", ws.remote_address, len(clients))
    try:
        await ws.wait_closed()
    finally:
        clients.discard(ws)
        log.warning("client disconnected clients=%d", len(clients))


async def broadcast(provider: SimulatedFeedProvider, malformed_every: int) -> None:
    sent = 0
    async for msg in provider.stream_messages("local"):
        sent += 1
        if malformed_every and sent % malformed_every == 0:
            # Exercise the consumer's decode-failure path
            msg = '{"timestamp": "not-a-number"}'
        websockets.broadcast(clients, msg)


async def main() -> None:
    parser = argparse.ArgumentParser(description="Local price feed for the dashboard")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=8082)
    parser.add_argument("--interval", type=float, default=0.5, help="Seconds between ticks")
    parser.add_argument("--start-price", type=float, default=100.0)
    parser.add_argument(
        "--malformed-every", type=int, default=0, help="Send a malformed message every N ticks"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    provider = SimulatedFeedProvider(start_price=args.start_price, interval_seconds=args.interval)

    async with websockets.serve(handler, args.host, args.port):
        print(f"Serving ticks on ws://{args.host}:{args.port}/ws")
        await broadcast(provider, args.malformed_every)


if __name__ == "__main__":
    asyncio.run(main())
