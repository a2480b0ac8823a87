# SPDX-License-Identifier: Apache-2.0
"""Shared test fixtures for the ibexparser test suite.

FIXTURES PROVIDED:
- data_dir: pristine copy of tests/data in a temporary directory
- solaria_entry: the StockEntry of the SOLARIA reference quote
- make_data_file: factory writing pasted text files into a temp directory
"""

from __future__ import annotations

import shutil
from datetime import date, time
from decimal import Decimal
from pathlib import Path
from typing import Callable

import pytest

from ibexparser.domain import StockEntry

DATA_DIR = Path(__file__).resolve().parent / "data"

SOLARIA_LINE = "SOLARIA   06/02/2024   17:35:05   13,0700   1.522.103   19.808,76"
SOLARIA_RECORD = "SOLARIA;06/02/2024;17:35:05;13,0700;1.522.103;19.808,76"


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Copy of the sample pasted files: base file, (1) and an empty 2."""
    target = tmp_path / "data"
    shutil.copytree(DATA_DIR, target)
    return target


@pytest.fixture
def solaria_entry() -> StockEntry:
    return StockEntry(
        ticker="SOLARIA",
        date=date(2024, 2, 6),
        time=time(17, 35, 5),
        last_price=Decimal("13.0700"),
        volume=1522103,
        cash_volume=Decimal("19808.76"),
    )


@pytest.fixture
def make_data_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write ``text`` to ``tmp_path/name`` and return the path."""

    def _make(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _make


@pytest.fixture
def solaria_line() -> str:
    return SOLARIA_LINE


@pytest.fixture
def solaria_record() -> str:
    return SOLARIA_RECORD
