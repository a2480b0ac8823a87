# SPDX-License-Identifier: Apache-2.0
"""Tests for file extraction and the StockExtractor collaborator."""

from __future__ import annotations

import logging
from datetime import time

import pytest

from ibexparser.config import ParserSettings
from ibexparser.exceptions import DataFileError
from ibexparser.parsing import StockExtractor, parse_file, parse_text


def _ordered_files(data_dir):
    return [data_dir / "data_ibex.csv", data_dir / "data_ibex(1).csv", data_dir / "data_ibex2.csv"]


class TestParseText:

    @pytest.mark.fast
    def test_parse_text_mixed_content(self, solaria_line):
        text = "Precios\n\n" + solaria_line + "\nNombre Último\n"

        entries = parse_text(text)

        assert len(entries) == 1
        assert entries[0].ticker == "SOLARIA"

    def test_empty_text(self):
        assert parse_text("") == []


class TestParseFile:

    def test_bme_table_file(self, data_dir):
        entries = parse_file(data_dir / "data_ibex.csv")

        # SOLARIA shows "Cierre" and the index row has no volume columns
        assert [e.ticker for e in entries] == ["ACCIONA", "ACS", "AENA", "B.SANTANDER"]

    def test_file_without_data_logs_and_returns_empty(self, data_dir, caplog):
        with caplog.at_level(logging.INFO, logger="ibexparser.parsing.extraction"):
            entries = parse_file(data_dir / "data_ibex2.csv")

        assert entries == []
        assert "contains no valid data" in caplog.text

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(DataFileError, match="Cannot read data file"):
            parse_file(tmp_path / "missing.csv")

    def test_undecodable_bytes_are_tolerated(self, tmp_path, solaria_line):
        path = tmp_path / "data_ibex.csv"
        path.write_bytes(b"\xff\xfe basura\n" + solaria_line.encode("utf-8") + b"\n")

        assert len(parse_file(path)) == 1

    def test_latin1_encoding(self, tmp_path, solaria_line):
        path = tmp_path / "data_ibex.csv"
        path.write_text("Último\n" + solaria_line + "\n", encoding="latin-1")

        assert len(parse_file(path, encoding="latin-1")) == 1


class TestStockExtractor:

    @pytest.mark.fast
    def test_concatenates_in_file_order(self, data_dir):
        extractor = StockExtractor()

        entries = extractor.extract(_ordered_files(data_dir))

        assert [e.ticker for e in entries] == [
            "ACCIONA", "ACS", "AENA", "B.SANTANDER",
            "SOLARIA", "AENA", "ACS", "AENA",
        ]
        assert extractor.empty_files == [data_dir / "data_ibex2.csv"]

    def test_caller_order_is_respected(self, data_dir):
        files = list(reversed(_ordered_files(data_dir)))

        entries = StockExtractor().extract(files)

        assert entries[0].ticker == "SOLARIA"
        assert entries[-1].ticker == "B.SANTANDER"

    def test_workers_keep_file_order(self, data_dir):
        sequential = StockExtractor().extract(_ordered_files(data_dir))
        threaded = StockExtractor(workers=4).extract(_ordered_files(data_dir))

        assert threaded == sequential

    def test_skip_repeated_drops_unchanged_quotes(self, data_dir):
        entries = StockExtractor(skip_repeated=True).extract(_ordered_files(data_dir))

        aena = [e.time for e in entries if e.ticker == "AENA"]
        # The second paste repeats AENA 17:35:30 before it trades again
        assert aena == [time(17, 35, 30), time(17, 40, 2)]
        assert len(entries) == 7

    def test_target_day_filter(self, data_dir):
        assert len(StockExtractor(target_day=6).extract(_ordered_files(data_dir))) == 8
        assert StockExtractor(target_day=7).extract(_ordered_files(data_dir)) == []

    def test_small_files_skipped(self, data_dir):
        extractor = StockExtractor(min_file_bytes=100)

        entries = extractor.extract(_ordered_files(data_dir))

        assert len(entries) == 8
        # Skipped files are not reported as files without data
        assert extractor.empty_files == []

    def test_from_settings(self):
        settings = ParserSettings(target_date="21/01/2023", skip_repeated=True, workers=2)

        extractor = StockExtractor.from_settings(settings)

        assert extractor.target_day == 21
        assert extractor.skip_repeated is True
        assert extractor.workers == 2

    def test_missing_file_propagates(self, tmp_path):
        with pytest.raises(DataFileError):
            StockExtractor().extract([tmp_path / "nope.csv"])
