# SPDX-License-Identifier: Apache-2.0
"""Text parsing for pasted BME price tables."""

from .extraction import StockExtractor, parse_file, parse_text
from .line_parser import (
    BME_TABLE_LAYOUT,
    DEFAULT_LAYOUTS,
    QUOTE_LAYOUT,
    RowLayout,
    parse_line,
    parse_lines,
)

__all__ = [
    "RowLayout",
    "QUOTE_LAYOUT",
    "BME_TABLE_LAYOUT",
    "DEFAULT_LAYOUTS",
    "parse_line",
    "parse_lines",
    "parse_text",
    "parse_file",
    "StockExtractor",
]
