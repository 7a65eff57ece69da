"""Pydantic models for eodhistoricaldata responses

Each model mirrors one JSON record returned by the API. Records are frozen:
they are built from a single response and handed to the caller as-is.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RealTimeQuote(BaseModel):
    """Latest quote from the real-time endpoint"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str = Field(..., description="Ticker code, e.g. AAPL.US")
    timestamp: int = Field(..., ge=0, description="UNIX timestamp in seconds")
    gmtoffset: int = Field(..., description="Exchange offset to GMT in seconds")
    open: float
    high: float
    low: float
    close: float
    volume: int = Field(..., ge=0)
    previous_close: float = Field(..., alias="previousClose")
    change: float = Field(..., description="Absolute change to previous close")
    change_p: float = Field(..., description="Percent change to previous close")

    @property
    def quote_time(self) -> datetime:
        """Quote time as an aware UTC datetime"""
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)


class HistoricQuote(BaseModel):
    """One trading day from the end-of-day endpoint

    Price fields and volume are missing on days where upstream has gaps;
    only the adjusted close is guaranteed.
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Quote date, YYYY-MM-DD")
    open: float | None = None
    high: float | None = None
    low: float | None = None
    close: float | None = None
    adjusted_close: float
    volume: int | None = Field(None, ge=0)


class Dividend(BaseModel):
    """One dividend payment from the dividend endpoint"""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    currency: str
    date: str = Field(..., description="Ex-dividend date, YYYY-MM-DD")
    declaration_date: str | None = None
    payment_date: str
    period: str = Field(..., description="Payment period, e.g. Quarterly")
    record_date: str
    unadjusted_value: float
    value: float = Field(..., description="Split-adjusted dividend value")
