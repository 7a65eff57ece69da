"""Pytest fixtures for eodhist tests"""

import json

import httpx
import pytest

from eodhist import EodHistConnector

TEST_TOKEN = "test-token-123"


@pytest.fixture
def real_time_payload() -> dict:
    """Real-time endpoint response for AAPL.US"""
    return {
        "code": "AAPL.US",
        "timestamp": 1580504400,
        "gmtoffset": 0,
        "open": 320.93,
        "high": 322.68,
        "low": 308.29,
        "close": 309.51,
        "volume": 49897096,
        "previousClose": 324.34,
        "change": -14.83,
        "change_p": -4.5724,
    }


@pytest.fixture
def eod_payload() -> list[dict]:
    """EOD endpoint response with one gap day"""
    return [
        {
            "date": "2020-01-02",
            "open": 296.24,
            "high": 300.6,
            "low": 295.19,
            "close": 300.35,
            "adjusted_close": 73.0595,
            "volume": 33911864,
        },
        {
            "date": "2020-01-03",
            "open": 297.15,
            "high": 300.58,
            "low": 296.5,
            "close": 297.43,
            "adjusted_close": 72.3492,
            "volume": 36633878,
        },
        {
            "date": "2020-01-06",
            "open": None,
            "high": None,
            "low": None,
            "close": None,
            "adjusted_close": 72.9198,
            "volume": None,
        },
    ]


@pytest.fixture
def dividend_payload() -> list[dict]:
    """Dividend endpoint response"""
    return [
        {
            "date": "2020-02-07",
            "declarationDate": "2020-01-28",
            "recordDate": "2020-02-10",
            "paymentDate": "2020-02-13",
            "period": "Quarterly",
            "value": 0.1925,
            "unadjustedValue": 0.77,
            "currency": "USD",
        },
        {
            "date": "2020-05-08",
            "declarationDate": None,
            "recordDate": "2020-05-11",
            "paymentDate": "2020-05-14",
            "period": "Quarterly",
            "value": 0.205,
            "unadjustedValue": 0.82,
            "currency": "USD",
        },
    ]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served"""

    def __init__(self, status_code: int = 200, body=None, content=None):
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._body = body
        self._content = content
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._content is not None:
            return httpx.Response(self._status_code, content=self._content)
        return httpx.Response(
            self._status_code, content=json.dumps(self._body).encode()
        )


@pytest.fixture
def make_connector():
    """Build a connector whose requests are served by a RecordingTransport"""

    def _make(status_code: int = 200, body=None, content=None, token=TEST_TOKEN):
        transport = RecordingTransport(status_code, body, content)
        return EodHistConnector(token, transport=transport), transport

    return _make
