"""Bot runner wrapping the Socket Mode client."""

import asyncio
import logging
from typing import Protocol

from slack_sdk.socket_mode.async_client import AsyncBaseSocketModeClient


class Bot(Protocol):
    async def run(self) -> None: ...


class SlackServer:
    """Keeps the Socket Mode connection open until the running task is cancelled."""

    def __init__(self, client: AsyncBaseSocketModeClient, logger: logging.Logger):
        self.client = client
        self.logger = logger

    async def run(self) -> None:
        """Connect and block until cancelled.

        The WSS URL is issued before connecting, since ``connect()`` retries
        every failure forever. Errors such as invalid_auth propagate unchanged
        and rate limiting is still retried by slack_sdk. On cancellation the
        client is closed and CancelledError is re-raised.
        """
        self.logger.info("🚀 Starting Slack Server")

        try:
            self.client.wss_uri = await self.client.issue_new_wss_url()
            await self.client.connect()
            await asyncio.sleep(float("inf"))
        finally:
            try:
                await self.client.close()
            except Exception:
                self.logger.exception("Failed to close Slack client")


def new_bot(client: AsyncBaseSocketModeClient, logger: logging.Logger) -> Bot:
    return SlackServer(client, logger)
