"""Builds the Socket Mode client used by the bot."""

import logging

from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.web.async_client import AsyncWebClient

from slack_bot.config import SlackConfig
from slack_bot.debug_logger import new_debug_logger


def new_client(config: SlackConfig, logger: logging.Logger) -> SocketModeClient:
    """Create a Socket Mode client with debug logging routed through ``logger``.

    No network calls are made here; bad credentials only show up once the
    client connects. Must be called with a running event loop, since the
    aiohttp client starts its message processor on construction.
    """
    debug_log = new_debug_logger(logger)

    web_client = AsyncWebClient(
        token=config.auth_token,
        logger=debug_log,
    )

    return SocketModeClient(
        app_token=config.app_token,
        web_client=web_client,
        logger=debug_log,
        trace_enabled=True,
    )
