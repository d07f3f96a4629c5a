"""Tests for budzy_bot.runner"""

import logging
from unittest.mock import patch

from fastapi import FastAPI

from budzy_bot.config import BotConfig, BotMode
from budzy_bot.runner import log_startup, main


class TestMain:
    def test_degraded_startup(self, caplog):
        config = BotConfig(port=4321)
        with patch("budzy_bot.runner.load_config", return_value=config), \
             patch("budzy_bot.runner.uvicorn.run") as mock_run, \
             caplog.at_level(logging.INFO, logger="budzy_bot.runner"):
            main()

        mock_run.assert_called_once()
        app = mock_run.call_args[0][0]
        assert isinstance(app, FastAPI)
        assert mock_run.call_args.kwargs["port"] == 4321
        assert mock_run.call_args.kwargs["host"] == "0.0.0.0"
        assert "Safe server running on port 4321" in caplog.text

    def test_full_startup(self, caplog):
        config = BotConfig(signing_secret="secret", bot_token="xoxb-test")
        with patch("budzy_bot.runner.load_config", return_value=config), \
             patch("budzy_bot.runner.uvicorn.run") as mock_run, \
             caplog.at_level(logging.INFO, logger="budzy_bot.runner"):
            main()

        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["port"] == 10000
        assert "Slack app running on port 10000" in caplog.text

    def test_config_read_once(self):
        with patch("budzy_bot.runner.load_config", return_value=BotConfig()) as mock_load, \
             patch("budzy_bot.runner.uvicorn.run"):
            main()
        mock_load.assert_called_once_with()


class TestLogStartup:
    def test_degraded_hint(self, caplog):
        with caplog.at_level(logging.INFO, logger="budzy_bot.runner"):
            log_startup(BotConfig(), BotMode.DEGRADED)
        assert "Set SLACK_SIGNING_SECRET and SLACK_BOT_TOKEN" in caplog.text
