# SPDX-License-Identifier: Apache-2.0
"""Recognizer for quote rows in text pasted from the BME price table.

Copying the table from the web page brings along headers, legends, blank
lines and the index row. Each line is therefore classified on its own: a line
whose fields fit a known row layout becomes a StockEntry, anything else is
skipped. Nothing here raises for bad input.

Example rows::

    SOLARIA   06/02/2024   17:35:05   13,0700   1.522.103   19.808,76
    ACS\t36,8400\t-0,38\t37,0600\t36,7000\t501.228\t18.508,41\t06/02/2024\t17:35:19
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, List, Optional, Sequence, Tuple

from ..domain import TICKER_RE, StockEntry
from ..locale_numbers import parse_decimal, parse_integer

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M:%S"

_DATE_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}:[0-9]{2}")

logger = logging.getLogger(__name__)

# Tabs or runs of two or more blanks separate columns in pasted tables.
_COLUMN_SEPARATOR_RE = re.compile(r"\t|\s{2,}")


@dataclass(frozen=True)
class RowLayout:
    """Column positions of the six StockEntry fields inside a data line."""

    name: str
    columns: int
    ticker: int
    date: int
    time: int
    last_price: int
    volume: int
    cash_volume: int


# Fields already in output order.
QUOTE_LAYOUT = RowLayout(
    name="quote",
    columns=6,
    ticker=0,
    date=1,
    time=2,
    last_price=3,
    volume=4,
    cash_volume=5,
)

# Nombre, Último, Dif. %, Máx., Mín., Volumen, Efectivo (miles €), Fecha, Hora
BME_TABLE_LAYOUT = RowLayout(
    name="bme_table",
    columns=9,
    ticker=0,
    date=7,
    time=8,
    last_price=1,
    volume=5,
    cash_volume=6,
)

DEFAULT_LAYOUTS: Tuple[RowLayout, ...] = (QUOTE_LAYOUT, BME_TABLE_LAYOUT)


def parse_date(token: str) -> Optional[date]:
    """Parse a ``DD/MM/YYYY`` token, or return None."""
    if not _DATE_RE.fullmatch(token):
        return None
    try:
        return datetime.strptime(token, DATE_FORMAT).date()
    except ValueError:
        return None


def parse_time(token: str) -> Optional[time]:
    """Parse a ``HH:MM:SS`` token, or return None.

    The table shows ``Cierre`` instead of a time once the session is closed;
    such rows are not quotes and are rejected here.
    """
    if not _TIME_RE.fullmatch(token):
        return None
    try:
        return datetime.strptime(token, TIME_FORMAT).time()
    except ValueError:
        return None


def tokenize(line: str) -> List[List[str]]:
    """Candidate field splits of a line, most specific first."""
    stripped = line.strip()
    if not stripped:
        return []

    candidates = [[token.strip() for token in _COLUMN_SEPARATOR_RE.split(stripped)]]
    by_whitespace = stripped.split()
    if by_whitespace != candidates[0]:
        candidates.append(by_whitespace)
    return candidates


def match_layout(tokens: Sequence[str], layout: RowLayout) -> Optional[StockEntry]:
    """Build a StockEntry from tokens if they fit the layout exactly."""
    if len(tokens) != layout.columns:
        return None

    ticker = tokens[layout.ticker]
    if not TICKER_RE.fullmatch(ticker):
        if any(char.isspace() for char in ticker):
            # Names such as "GRIFOLS CL.A" are not valid tickers.
            logger.debug("Skipping row with spaced name %r", ticker)
        return None

    quote_date = parse_date(tokens[layout.date])
    quote_time = parse_time(tokens[layout.time])
    if quote_date is None or quote_time is None:
        return None

    try:
        return StockEntry(
            ticker=ticker,
            date=quote_date,
            time=quote_time,
            last_price=parse_decimal(tokens[layout.last_price]),
            volume=parse_integer(tokens[layout.volume]),
            cash_volume=parse_decimal(tokens[layout.cash_volume]),
        )
    except ValueError:
        # InvalidNumberError and InvalidStockEntryError are both ValueErrors.
        return None


def parse_line(
    line: str, layouts: Sequence[RowLayout] = DEFAULT_LAYOUTS
) -> Optional[StockEntry]:
    """Classify a single line and extract its quote.

    Args:
        line: Raw text line; a trailing newline is ignored.
        layouts: Row layouts to try, in order.

    Returns:
        StockEntry if the line is a data line, None otherwise.
    """
    if not isinstance(line, str):
        return None

    for tokens in tokenize(line):
        for layout in layouts:
            entry = match_layout(tokens, layout)
            if entry is not None:
                return entry
    return None


def parse_lines(
    lines: Iterable[str], layouts: Sequence[RowLayout] = DEFAULT_LAYOUTS
) -> List[StockEntry]:
    """Parse every line independently and keep the recognized entries in order."""
    entries: List[StockEntry] = []
    for line in lines:
        entry = parse_line(line, layouts)
        if entry is not None:
            entries.append(entry)
    return entries
