"""Slack configuration — loads the bot credentials from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

APP_TOKEN_VAR = "SLACK_APP_TOKEN"
AUTH_TOKEN_VAR = "SLACK_AUTH_TOKEN"
CHANNEL_ID_VAR = "SLACK_CHANNEL_ID"


class ConfigError(RuntimeError):
    """A required configuration value is missing."""


@dataclass(frozen=True)
class SlackConfig:
    """Credentials and target channel for the Socket Mode connection."""

    app_token: str = field(repr=False)
    auth_token: str = field(repr=False)
    channel_id: str


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigError(f"{name} environment variable not set")
    return value


def load_config(environ: Mapping[str, str] | None = None) -> SlackConfig:
    """Read the Slack settings from the environment.

    Variables are read in order (app token, auth token, channel ID) and the
    first missing one raises ConfigError. A variable set to the empty string
    counts as missing, unlike a plain presence check. Values are taken
    verbatim.
    """
    if environ is None:
        environ = os.environ

    app_token = _require(environ, APP_TOKEN_VAR)
    auth_token = _require(environ, AUTH_TOKEN_VAR)
    channel_id = _require(environ, CHANNEL_ID_VAR)

    return SlackConfig(
        app_token=app_token,
        auth_token=auth_token,
        channel_id=channel_id,
    )
