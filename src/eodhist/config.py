"""Configuration helpers for the eodhist client"""

import os

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from .exceptions import ConfigurationError

API_TOKEN_ENV_VAR = "EODHD_API_TOKEN"


def get_api_token() -> str:
    """Read the eodhistoricaldata API token from the environment.

    A ``.env`` file found from the working directory upward is loaded first,
    without overriding variables that are already set.

    Returns:
        The API token string

    Raises:
        ConfigurationError: If the token variable is unset or blank
    """
    load_dotenv(find_dotenv(usecwd=True))

    token = os.getenv(API_TOKEN_ENV_VAR, "").strip()
    if not token:
        raise ConfigurationError(
            f"Missing required environment variable: {API_TOKEN_ENV_VAR}"
        )

    logger.debug(f"Loaded API token from {API_TOKEN_ENV_VAR}")
    return token
