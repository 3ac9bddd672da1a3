import asyncio
import unittest

from dashboard.feed.source import TickSource
from dashboard.models.market import Tick
from dashboard.session import TradingSession
from dashboard.providers.base import FeedProvider


class ListProvider(FeedProvider):
    def __init__(self, messages):
        self.messages = messages

    async def stream_messages(self, endpoint):
        for raw in self.messages:
            yield raw
            await asyncio.sleep(0)


class TestTradingSession(unittest.TestCase):
    def test_tick_reaches_stats_ledger_and_chart(self):
        session = TradingSession(initial_balance=100.0)
        frames = []
        session.chart.add_renderer(frames.append)

        session.on_tick(Tick(timestamp=1, price=50.0))

        self.assertEqual(session.stats.current.count, 1)
        self.assertEqual(session.ledger.current_price, 50.0)
        self.assertEqual(frames, [[(1, 50.0)]])

    def test_trades_use_latest_price(self):
        session = TradingSession(initial_balance=100.0)
        session.on_tick(Tick(timestamp=1, price=50.0))
        self.assertFalse(session.buy(2).accepted)
        self.assertTrue(session.buy(1).accepted)

        session.on_tick(Tick(timestamp=2, price=80.0))
        result = session.sell(1)
        self.assertTrue(result.accepted)
        self.assertEqual(result.ledger.balance, 130.0)
        self.assertEqual(session.stats.current.count, 2)


class TestTradingSessionFeed(unittest.IsolatedAsyncioTestCase):
    async def test_start_and_stop(self):
        provider = ListProvider([
            '{"timestamp": 1, "price": 10.0}',
            "{broken",
            '{"timestamp": 2, "price": 20.0}',
        ])
        source = TickSource(provider)
        session = TradingSession(initial_balance=1_000.0)

        handle = session.start(source, "ws://test/feed")
        with self.assertRaises(RuntimeError):
            session.start(source, "ws://test/other")

        await handle.wait_closed()

        self.assertEqual(session.stats.current.count, 2)
        self.assertEqual(session.chart.points(), [(1, 10.0), (2, 20.0)])
        self.assertEqual(session.ledger.current_price, 20.0)

        session.stop()
        self.assertTrue(handle.closed)
        source.on_message('{"timestamp": 3, "price": 30.0}')
        self.assertEqual(session.stats.current.count, 2)

    async def test_restart_opens_fresh_stream_state(self):
        session = TradingSession(initial_balance=1_000.0)

        first = session.start(TickSource(ListProvider(['{"timestamp": 1, "price": 10.0}'])), "ws://a")
        await first.wait_closed()
        self.assertTrue(session.buy(2).accepted)
        session.stop()

        second = session.start(TickSource(ListProvider(['{"timestamp": 2, "price": 20.0}'])), "ws://b")
        await second.wait_closed()

        self.assertEqual(session.stats.current.count, 1)
        self.assertEqual(session.stats.current.mean, 20.0)
        self.assertEqual(session.chart.points(), [(2, 20.0)])
        self.assertEqual(session.ledger.ledger.owned_shares, 2)
        self.assertEqual(len(session.ledger.ledger.log), 1)

    async def test_start_allowed_after_stream_ended(self):
        session = TradingSession(initial_balance=1_000.0)
        old_source = TickSource(ListProvider(['{"timestamp": 1, "price": 10.0}']))

        handle = session.start(old_source, "ws://a")
        await handle.wait_closed()
        self.assertTrue(handle.done)
        self.assertFalse(handle.closed)

        new_handle = session.start(TickSource(ListProvider([])), "ws://b")
        await new_handle.wait_closed()

        old_source.on_message('{"timestamp": 5, "price": 50.0}')
        self.assertEqual(session.stats.current.count, 0)
