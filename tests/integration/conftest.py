"""Pytest fixtures for integration tests against the live API"""

import os

import pytest

from eodhist import API_TOKEN_ENV_VAR, EodHistConnector

# Public demo token; it only serves a handful of tickers such as AAPL.US
DEMO_TOKEN = "demo"


@pytest.fixture(scope="module")
def connector() -> EodHistConnector:
    """Connector using EODHD_API_TOKEN, or the demo token when unset."""
    return EodHistConnector(os.getenv(API_TOKEN_ENV_VAR) or DEMO_TOKEN)
