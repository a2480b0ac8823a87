# SPDX-License-Identifier: Apache-2.0
"""Exceptions raised by ibexparser.

The line parser itself never raises for malformed input; these errors belong
to the layers that touch the filesystem or build values directly.
"""

from __future__ import annotations


class IbexParserError(Exception):
    """Base class for ibexparser errors."""


class DataDirectoryError(IbexParserError):
    """Raised when the data directory is missing or cannot be listed."""


class DataFileError(IbexParserError):
    """Raised when a data file cannot be read."""


class InvalidNumberError(IbexParserError, ValueError):
    """Raised when a locale formatted number cannot be parsed."""


class InvalidStockEntryError(IbexParserError, ValueError):
    """Raised when a StockEntry is built from out-of-shape values."""
