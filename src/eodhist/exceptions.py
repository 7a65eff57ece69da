"""Consolidated exceptions for the eodhist client.

Every request failure surfaces as one of the three EodHistDataError
subclasses below. The underlying httpx or pydantic error is chained as
``__cause__``.
"""


class EodHistError(Exception):
    """Base exception for eodhist errors"""

    pass


class EodHistDataError(EodHistError):
    """Base exception for failed API requests"""

    pass


class FetchFailedError(EodHistDataError):
    """Raised when the API answers with a non-200 status code"""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            "fetching the data from eodhistoricaldata failed "
            f"with status code {status_code}"
        )


class DeserializeFailedError(EodHistDataError):
    """Raised when a 200 response body is not valid JSON or has the wrong shape"""

    def __init__(self, detail: str | None = None) -> None:
        message = "deserializing response from eodhistoricaldata failed"
        if detail:
            message = f"{message}, caused by: {detail}"
        super().__init__(message)


class ConnectionFailedError(EodHistDataError):
    """Raised when no response was received from the server"""

    def __init__(self, detail: str | None = None) -> None:
        message = "connection to eodhistoricaldata server failed"
        if detail:
            message = f"{message}, caused by: {detail}"
        super().__init__(message)


class ConfigurationError(EodHistError):
    """Raised when configuration is invalid or missing"""

    pass
