"""
splashy Configuration Management

This file handles loading the handful of variables splashy needs from the environment. The
Unsplash access key is the only secret and, like any other variable here, can be supplied
either as a real environment variable or through a .env file in the working directory or one
of its parents (python-dotenv never overrides a variable that is already set).

Raise a SplashyConfigError for any issues that arise in processing these configuration
variables. A missing access key is not one of them: requests are then sent unauthenticated
and Unsplash answers with a 401.
"""

import logging
import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import find_dotenv
from dotenv import load_dotenv

UNSPLASH_API_URL = "https://api.unsplash.com"


class SplashyConfigError(Exception):
    """Raise when an issue occurs with handling splashy configuration."""

    pass


@dataclass(frozen=True)
class SplashyConfig:
    """
    Dataclass to represent configuration variables for splashy. Instances are immutable so a
    config can be shared by every client in the process once it has been loaded.
    """

    UNSPLASH_ACCESS_KEY: str = ""
    UNSPLASH_API_URL: str = UNSPLASH_API_URL
    SPLASHY_LOG_LEVEL: str = "WARNING"

    def __post_init__(self):

        url = urlparse(self.UNSPLASH_API_URL)
        if url.scheme not in ("http", "https") or not url.netloc:
            raise SplashyConfigError(
                f"UNSPLASH_API_URL must be an absolute http(s) url, got '{self.UNSPLASH_API_URL}'"
            )

        # getLevelName returns an int only for registered level names
        if not isinstance(logging.getLevelName(self.SPLASHY_LOG_LEVEL.upper()), int):
            raise SplashyConfigError(
                f"SPLASHY_LOG_LEVEL '{self.SPLASHY_LOG_LEVEL}' is not a valid log level"
            )

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.SPLASHY_LOG_LEVEL.upper())


def load_config() -> SplashyConfig:
    """
    Load splashy variables from the environment (after merging in a .env file, if any) and
    instantiate them as a SplashyConfig dataclass.
    """

    load_dotenv(find_dotenv(usecwd=True))

    return SplashyConfig(
        UNSPLASH_ACCESS_KEY=os.environ.get("UNSPLASH_ACCESS_KEY", "").strip(),
        UNSPLASH_API_URL=os.environ.get("UNSPLASH_API_URL", UNSPLASH_API_URL).rstrip("/"),
        SPLASHY_LOG_LEVEL=os.environ.get("SPLASHY_LOG_LEVEL", "WARNING"),
    )
