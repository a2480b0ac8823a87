# SPDX-License-Identifier: Apache-2.0
"""Filtering and rendering of StockEntry values as delimited text.

Output lines keep the source conventions so they can be imported by tools
configured for Spanish locales::

    SOLARIA;06/02/2024;17:35:05;13,0700;1.522.103;19.808,76
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, TextIO

from .domain import StockEntry
from .locale_numbers import format_decimal, format_integer
from .parsing.line_parser import TIME_FORMAT

DEFAULT_SEPARATOR = ";"


def format_date(value: date) -> str:
    """Render a date as ``DD/MM/YYYY``, zero padding years below 1000."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def filter_entries(
    entries: Iterable[StockEntry],
    ticker: Optional[str] = None,
    case_sensitive: bool = True,
) -> List[StockEntry]:
    """Keep the entries of one ticker, preserving their relative order.

    With no ticker every entry is kept. The ticker is compared as given;
    callers strip user input before filtering.
    """
    if ticker is None:
        return list(entries)

    wanted = ticker
    if case_sensitive:
        return [entry for entry in entries if entry.ticker == wanted]
    wanted = wanted.upper()
    return [entry for entry in entries if entry.ticker.upper() == wanted]


def format_entry(entry: StockEntry, separator: str = DEFAULT_SEPARATOR) -> str:
    """Render one entry as ``ticker;date;time;price;volume;cash``."""
    return separator.join(
        (
            entry.ticker,
            format_date(entry.date),
            entry.time.strftime(TIME_FORMAT),
            format_decimal(entry.last_price),
            format_integer(entry.volume),
            format_decimal(entry.cash_volume),
        )
    )


def format_entries(entries: Iterable[StockEntry], separator: str = DEFAULT_SEPARATOR) -> List[str]:
    return [format_entry(entry, separator) for entry in entries]


def write_entries(
    entries: Iterable[StockEntry], stream: TextIO, separator: str = DEFAULT_SEPARATOR
) -> int:
    """Write one line per entry to a text stream. Returns the number of lines."""
    count = 0
    for line in format_entries(entries, separator):
        stream.write(line + "\n")
        count += 1
    return count
