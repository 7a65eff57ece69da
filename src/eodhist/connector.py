"""EodHistConnector - async client for the eodhistoricaldata API

Three query operations share one request routine:

- get_latest_quote      /real-time/{ticker}
- get_quote_history     /eod/{ticker}
- get_dividend_history  /div/{ticker}

Each call opens its own httpx.AsyncClient and closes it when the response
has been validated, so the connector holds nothing but its token.
"""

from datetime import date
from typing import TypeVar

import httpx
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from .config import get_api_token
from .exceptions import (
    ConnectionFailedError,
    DeserializeFailedError,
    FetchFailedError,
)
from .log import log_request, log_response
from .models import Dividend, HistoricQuote, RealTimeQuote

T = TypeVar("T")

DATE_FORMAT = "%Y-%m-%d"

_REAL_TIME_ADAPTER = TypeAdapter(RealTimeQuote)
_HISTORY_ADAPTER = TypeAdapter(list[HistoricQuote])
_DIVIDEND_ADAPTER = TypeAdapter(list[Dividend])


def format_date(value: date) -> str:
    """Format a date (or the date part of a datetime) as YYYY-MM-DD"""
    return value.strftime(DATE_FORMAT)


class EodHistConnector:
    """Connector to the eodhistoricaldata web API

    Holds the fixed base URL and the caller's API token. Configuration is
    read-only after construction, so a single instance may serve concurrent
    calls.
    """

    BASE_URL = "https://eodhistoricaldata.com/api"

    def __init__(
        self,
        api_token: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize connector

        The token is not validated here; an invalid token surfaces as a
        FetchFailedError on the first request.

        Args:
            api_token: API token issued by eodhistoricaldata
            transport: Optional httpx transport used for every request
                (e.g. httpx.MockTransport in tests)
        """
        self._api_token = api_token
        self._transport = transport

    @classmethod
    def from_env(
        cls, transport: httpx.AsyncBaseTransport | None = None
    ) -> "EodHistConnector":
        """Create a connector with the token from EODHD_API_TOKEN.

        Raises:
            ConfigurationError: If the token is not set
        """
        return cls(get_api_token(), transport=transport)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(url={self.BASE_URL!r})"

    async def get_latest_quote(self, ticker: str) -> RealTimeQuote:
        """Retrieve the latest quote for the given ticker

        Args:
            ticker: Exchange-qualified ticker, e.g. "AAPL.US"

        Returns:
            RealTimeQuote for the ticker

        Raises:
            FetchFailedError: Non-200 response
            DeserializeFailedError: Body is not a valid quote
            ConnectionFailedError: No response received
        """
        url = f"{self.BASE_URL}/real-time/{ticker}"
        params = {"api_token": self._api_token, "fmt": "json"}
        return await self._send_request(url, params, _REAL_TIME_ADAPTER)

    async def get_quote_history(
        self, ticker: str, start_date: date, end_date: date
    ) -> list[HistoricQuote]:
        """Retrieve daily quotes from start_date to end_date (inclusive)

        Quotes come back in the order the API returns them, oldest first.
        A range without trading days yields an empty list.

        Args:
            ticker: Exchange-qualified ticker, e.g. "AAPL.US"
            start_date: First day of the range
            end_date: Last day of the range

        Returns:
            List of HistoricQuote, one per trading day
        """
        url = f"{self.BASE_URL}/eod/{ticker}"
        params = {
            "from": format_date(start_date),
            "to": format_date(end_date),
            "api_token": self._api_token,
            "period": "d",
            "fmt": "json",
        }
        return await self._send_request(url, params, _HISTORY_ADAPTER)

    async def get_dividend_history(
        self, ticker: str, start_date: date
    ) -> list[Dividend]:
        """Retrieve all dividends from start_date onward

        Args:
            ticker: Exchange-qualified ticker, e.g. "AAPL.US"
            start_date: Earliest ex-dividend date to include

        Returns:
            List of Dividend records
        """
        url = f"{self.BASE_URL}/div/{ticker}"
        params = {
            "from": format_date(start_date),
            "api_token": self._api_token,
            "fmt": "json",
        }
        return await self._send_request(url, params, _DIVIDEND_ADAPTER)

    def _build_http_client(self) -> httpx.AsyncClient:
        """Create an AsyncClient with request/response logging hooks."""
        return httpx.AsyncClient(
            transport=self._transport,
            follow_redirects=True,
            event_hooks={
                "request": [log_request],
                "response": [log_response],
            },
        )

    async def _send_request(
        self, url: str, params: dict[str, str], adapter: TypeAdapter[T]
    ) -> T:
        """Send a GET request and validate the body into the adapter's type

        Args:
            url: Endpoint URL without query string
            params: Query parameters, in wire order
            adapter: TypeAdapter for the expected response shape

        Returns:
            The validated response

        Raises:
            FetchFailedError: If the status code is not 200
            DeserializeFailedError: If the body fails JSON or schema validation
            ConnectionFailedError: On any transport-level failure, or when
                the request URL cannot be built
        """
        try:
            async with self._build_http_client() as client:
                response = await client.get(url, params=params)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug(f"Connection failed: {type(e).__name__}: {e}")
            raise ConnectionFailedError(str(e) or type(e).__name__) from e

        if response.status_code != 200:
            logger.debug(f"Fetch failed with status {response.status_code}")
            raise FetchFailedError(response.status_code, response.text)

        try:
            result = adapter.validate_json(response.content)
        except ValidationError as e:
            logger.debug(
                f"Deserializing {len(response.content)} bytes failed: "
                f"{e.error_count()} error(s)"
            )
            raise DeserializeFailedError(
                f"{e.error_count()} validation error(s) for {e.title}"
            ) from e

        return result
