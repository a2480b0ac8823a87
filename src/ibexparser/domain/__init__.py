# SPDX-License-Identifier: Apache-2.0
"""Domain model package for ibexparser."""

from .value_objects import TICKER_RE, VOLUME_SCALE, StockEntry

__all__ = [
    "StockEntry",
    "TICKER_RE",
    "VOLUME_SCALE",
]
