"""Adapter that routes slack_sdk's internal logging into our logger."""

import logging

BOT_LABEL = "slack_socket"


class DebugLogger(logging.LoggerAdapter):
    """Logger handed to slack_sdk, tagging every record with ``bot=<label>``.

    slack_sdk only emits its verbose request/trace output when its logger
    reports a DEBUG level, so ``level`` is pinned to DEBUG. Whether those
    records are shown is left to the handlers of the wrapped logger.
    """

    def __init__(self, logger: logging.Logger, label: str = BOT_LABEL):
        super().__init__(logger, {"bot": label})

    @property
    def level(self) -> int:
        return logging.DEBUG

    def output(self, call_depth: int, message: str) -> None:
        """Write a single debug line. ``call_depth`` is ignored."""
        self.debug(message)


def new_debug_logger(logger: logging.Logger) -> DebugLogger:
    return DebugLogger(logger)
