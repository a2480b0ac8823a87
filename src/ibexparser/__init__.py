# SPDX-License-Identifier: Apache-2.0
"""ibexparser package initialization."""

__version__ = "0.1.0"

from .domain import StockEntry
from .formatting import filter_entries, format_entry
from .loader import load_entries
from .parsing import parse_file, parse_line, parse_text

__all__ = [
    "StockEntry",
    "parse_line",
    "parse_text",
    "parse_file",
    "filter_entries",
    "format_entry",
    "load_entries",
    "__version__",
]
