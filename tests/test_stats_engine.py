import math
import unittest

from dashboard.models.market import RunningStats, Tick
from dashboard.stats.engine import StatsEngine, replay, update_stats


def ticks(prices):
    return [Tick(timestamp=1_700_000_000_000 + i, price=p) for i, p in enumerate(prices)]


class TestStatsEngine(unittest.TestCase):
    def test_empty_stats(self):
        stats = StatsEngine().current
        self.assertEqual(stats.count, 0)
        self.assertEqual(stats.mean, 0.0)
        self.assertEqual(stats.max, -math.inf)
        self.assertEqual(stats.min, math.inf)

    def test_running_values_match_full_history(self):
        prices = [101.5, 99.25, 100.0, 250.75, 0.5, 100.0, 42.0]
        engine = StatsEngine()

        for i, tick in enumerate(ticks(prices), start=1):
            stats = engine.observe(tick)
            seen = prices[:i]
            self.assertEqual(stats.count, i)
            self.assertAlmostEqual(stats.mean, sum(seen) / i, places=9)
            self.assertEqual(stats.max, max(seen))
            self.assertEqual(stats.min, min(seen))

    def test_negative_price_is_folded_in(self):
        engine = StatsEngine()
        engine.observe(Tick(timestamp=0, price=-5.0))
        stats = engine.observe(Tick(timestamp=0, price=5.0))
        self.assertEqual(stats.min, -5.0)
        self.assertAlmostEqual(stats.mean, 0.0)

    def test_replay_reproduces_engine_state(self):
        history = ticks([10.0, 12.5, 9.75, 11.0, 30.0, 1.25])
        engine = StatsEngine()
        for tick in history:
            engine.observe(tick)

        self.assertEqual(replay(history), engine.current)
        self.assertEqual(replay(history), replay(history))

    def test_update_does_not_mutate_input(self):
        before = RunningStats()
        after = update_stats(before, 10.0)
        self.assertEqual(before, RunningStats())
        self.assertEqual(after.count, 1)
        self.assertEqual(after.mean, 10.0)

    def test_reset(self):
        engine = StatsEngine()
        engine.observe(Tick(timestamp=1, price=3.0))
        engine.reset()
        self.assertEqual(engine.current, RunningStats())
