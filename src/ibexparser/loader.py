"""Public data loader API for parsed BME quotes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from .config import ParserSettings
from .discovery import discover
from .domain import StockEntry
from .formatting import filter_entries
from .parsing import StockExtractor

__all__ = ["load_entries", "entries_to_frame"]

logger = logging.getLogger(__name__)

COLUMNS = ["ticker", "last_price", "volume", "cash_volume"]


def entries_to_frame(entries: Iterable[StockEntry]) -> pd.DataFrame:
    """Convert entries to a DataFrame indexed by quote timestamp.

    Prices and cash volumes stay ``Decimal`` objects (object dtype) so no
    precision is lost; volume is ``int64``.
    """
    rows = [
        {
            "timestamp": entry.timestamp,
            "ticker": entry.ticker,
            "last_price": entry.last_price,
            "volume": entry.volume,
            "cash_volume": entry.cash_volume,
        }
        for entry in entries
    ]
    df = pd.DataFrame(rows, columns=["timestamp"] + COLUMNS)
    df["timestamp"] = pd.to_datetime(df["timestamp"])
    df["volume"] = df["volume"].astype("int64")
    return df.set_index("timestamp")


def load_entries(
    directory: Union[str, Path],
    ticker: Optional[str] = None,
    *,
    settings: Optional[ParserSettings] = None,
) -> pd.DataFrame:
    """
    Load quotes from the pasted data files of a directory.

    Parameters
    ----------
    directory : Union[str, Path]
        Directory holding ``data_ibex*.csv`` style files.
    ticker : str, optional
        Keep only this ticker. None = every ticker.
    settings : ParserSettings, optional
        File naming, target day and filtering options. Defaults apply when
        omitted.

    Returns
    -------
    pandas.DataFrame
        Columns [ticker, last_price, volume, cash_volume] indexed by
        ``timestamp``, rows in file order.

    Raises
    ------
    DataDirectoryError
        If the directory does not exist.
    DataFileError
        If a discovered file cannot be read.
    """
    settings = settings or ParserSettings()

    files = discover(directory, settings.file_stem, settings.file_ext)
    if not files:
        logger.warning("No data files found in %s", directory)

    entries = StockExtractor.from_settings(settings).extract(files)
    entries = filter_entries(entries, ticker, case_sensitive=settings.case_sensitive)
    return entries_to_frame(entries)
