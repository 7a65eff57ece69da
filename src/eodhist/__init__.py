"""Async client for the eodhistoricaldata market-data API.

Usage::

    from datetime import date

    from eodhist import EodHistConnector

    connector = EodHistConnector("your-api-token")
    quote = await connector.get_latest_quote("AAPL.US")
    history = await connector.get_quote_history(
        "AAPL.US", date(2020, 1, 1), date(2020, 1, 31)
    )

Logging is disabled by default; enable it with ``logger.enable("eodhist")``.
"""

from loguru import logger

from .config import API_TOKEN_ENV_VAR, get_api_token
from .connector import EodHistConnector
from .exceptions import (
    ConfigurationError,
    ConnectionFailedError,
    DeserializeFailedError,
    EodHistDataError,
    EodHistError,
    FetchFailedError,
)
from .log import install_logging_bridge
from .models import Dividend, HistoricQuote, RealTimeQuote

logger.disable("eodhist")

__all__ = [
    "API_TOKEN_ENV_VAR",
    "ConfigurationError",
    "ConnectionFailedError",
    "DeserializeFailedError",
    "Dividend",
    "EodHistConnector",
    "EodHistDataError",
    "EodHistError",
    "FetchFailedError",
    "HistoricQuote",
    "RealTimeQuote",
    "get_api_token",
    "install_logging_bridge",
]
