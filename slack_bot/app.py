"""Slack bot entry point (Socket Mode, single workspace).

Reads SLACK_APP_TOKEN, SLACK_AUTH_TOKEN and SLACK_CHANNEL_ID from the
environment (or a .env file in the working directory) and keeps the
connection open until interrupted:

    python -m slack_bot.app
"""

import asyncio
import logging
import os
import signal
import sys

from dotenv import load_dotenv

from slack_bot.bot import new_bot
from slack_bot.client import new_client
from slack_bot.config import ConfigError, SlackConfig, load_config

logger = logging.getLogger(__name__)


def _install_signal_handlers(task: asyncio.Task) -> None:
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGTERM, task.cancel)
    except NotImplementedError:
        # Windows event loops have no signal handler support.
        pass


async def serve(config: SlackConfig) -> None:
    """Build the client and bot inside the running loop and run until cancelled."""
    _install_signal_handlers(asyncio.current_task())

    client = new_client(config, logger)
    bot = new_bot(client, logger)

    await bot.run()


def main() -> int:
    load_dotenv()
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

    try:
        config = load_config()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    try:
        asyncio.run(serve(config))
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("Slack bot stopped.")
    except Exception:
        logger.exception("Slack bot terminated with an error")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
