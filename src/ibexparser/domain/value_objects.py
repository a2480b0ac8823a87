# SPDX-License-Identifier: Apache-2.0
"""Domain value objects for ibexparser.

A StockEntry is a single quote row of the BME price table: the last traded
price of a ticker at a given date and time, with the session volume and the
cash traded so far. It is immutable and defined only by its values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict

from ..exceptions import InvalidStockEntryError

# Uppercase token with at least one letter; dots and ampersands appear in
# names such as "B.SANTANDER".
TICKER_RE = re.compile(r"(?=[A-Z0-9.&\-]*[A-Z])[A-Z0-9.&\-]+")

# Volume and cash volume are published in thousands.
VOLUME_SCALE = 1000


@dataclass(frozen=True)
class StockEntry:
    """Quote for one ticker as published in the BME price table.

    ``volume`` and ``cash_volume`` keep the magnitude written in the source,
    which is expressed in thousands. Use ``shares_traded`` and ``cash_traded``
    for the scaled values.
    """

    ticker: str
    date: date
    time: time
    last_price: Decimal
    volume: int
    cash_volume: Decimal

    def __post_init__(self):
        """Validate field shapes on creation."""
        if not isinstance(self.ticker, str) or not TICKER_RE.fullmatch(self.ticker):
            raise InvalidStockEntryError(f"Invalid ticker: {self.ticker!r}")

        if not isinstance(self.date, date) or isinstance(self.date, datetime):
            raise InvalidStockEntryError(f"Invalid date: {self.date!r}")
        if not isinstance(self.time, time):
            raise InvalidStockEntryError(f"Invalid time: {self.time!r}")

        if isinstance(self.volume, bool) or not isinstance(self.volume, int):
            raise InvalidStockEntryError(f"Volume must be an integer: {self.volume!r}")
        if self.volume < 0:
            raise InvalidStockEntryError(f"Volume cannot be negative: {self.volume}")

        for name in ("last_price", "cash_volume"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                if isinstance(value, bool) or not isinstance(value, (int, float, str)):
                    raise InvalidStockEntryError(f"Invalid {name}: {value!r}")
                value = Decimal(str(value))
                object.__setattr__(self, name, value)
            if not value.is_finite() or value < 0:
                raise InvalidStockEntryError(f"Invalid {name}: {value}")

    @property
    def timestamp(self) -> datetime:
        """Date and time of the quote as a naive datetime."""
        return datetime.combine(self.date, self.time)

    @property
    def shares_traded(self) -> int:
        """Session volume in shares."""
        return self.volume * VOLUME_SCALE

    @property
    def cash_traded(self) -> Decimal:
        """Session cash volume in currency units."""
        return self.cash_volume * VOLUME_SCALE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ticker": self.ticker,
            "date": self.date,
            "time": self.time,
            "last_price": self.last_price,
            "volume": self.volume,
            "cash_volume": self.cash_volume,
        }
