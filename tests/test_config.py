import os
import unittest
from unittest import mock

from dashboard.config import get_settings


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = get_settings()

        self.assertEqual(settings.feed_ws_url, "ws://localhost:8082/ws")
        self.assertEqual(settings.feed_provider, "WEBSOCKET")
        self.assertEqual(settings.initial_balance, 10000.0)
        self.assertEqual(settings.log_level, "INFO")

    def test_overrides(self):
        env = {"INITIAL_BALANCE": "250.5", "FEED_WS_URL": "ws://feed:9000/ws", "LOG_LEVEL": "debug"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        self.assertEqual(settings.initial_balance, 250.5)
        self.assertEqual(settings.feed_ws_url, "ws://feed:9000/ws")
        self.assertEqual(settings.log_level, "DEBUG")

    def test_invalid_values(self):
        for env in ({"INITIAL_BALANCE": "lots"}, {"INITIAL_BALANCE": "-1"}, {"SIM_INTERVAL_SECONDS": "x"}):
            with self.subTest(env=env):
                with mock.patch.dict(os.environ, env, clear=True):
                    with self.assertRaises(RuntimeError):
                        get_settings()
