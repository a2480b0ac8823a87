# SPDX-License-Identifier: Apache-2.0
"""Tests for data file discovery and ordering."""

from __future__ import annotations

import pytest

from ibexparser.discovery import discover, suffix_index
from ibexparser.exceptions import DataDirectoryError


def _touch(directory, *names):
    for name in names:
        (directory / name).write_text("x", encoding="utf-8")


class TestDiscover:

    @pytest.mark.fast
    def test_numeric_not_lexical_order(self, tmp_path):
        _touch(tmp_path, "data_ibex10.csv", "data_ibex2.csv", "data_ibex.csv")

        files = discover(tmp_path)

        assert [f.name for f in files] == ["data_ibex.csv", "data_ibex2.csv", "data_ibex10.csv"]

    def test_parenthesized_suffixes(self, tmp_path):
        _touch(tmp_path, "data_ibex(3).csv", "data_ibex(1).csv", "data_ibex.csv", "data_ibex(12).csv")

        files = discover(tmp_path)

        assert [f.name for f in files] == [
            "data_ibex.csv",
            "data_ibex(1).csv",
            "data_ibex(3).csv",
            "data_ibex(12).csv",
        ]

    def test_unrelated_files_ignored(self, tmp_path):
        _touch(
            tmp_path,
            "data_ibex.csv",
            "data_ibex.txt",
            "dato_ibex.csv",
            "data_ibex_old.csv",
            "data_ibex(2.csv",
            "notes.csv",
        )
        (tmp_path / "data_ibex5.csv").mkdir()

        assert [f.name for f in discover(tmp_path)] == ["data_ibex.csv"]

    def test_base_file_sorts_before_suffix_zero(self, tmp_path):
        _touch(tmp_path, "data_ibex0.csv", "data_ibex.csv")

        assert [f.name for f in discover(tmp_path)] == ["data_ibex.csv", "data_ibex0.csv"]

    def test_colliding_suffixes_ordered_by_name(self, tmp_path):
        _touch(tmp_path, "data_ibex2.csv", "data_ibex(2).csv", "data_ibex_2.csv")

        assert [f.name for f in discover(tmp_path)] == [
            "data_ibex(2).csv",
            "data_ibex2.csv",
            "data_ibex_2.csv",
        ]

    def test_custom_stem_and_extension(self, tmp_path):
        _touch(tmp_path, "quotes-1.TXT", "quotes.txt", "data_ibex.csv")

        files = discover(tmp_path, file_stem="quotes", file_ext=".txt")

        assert [f.name for f in files] == ["quotes.txt", "quotes-1.TXT"]

    def test_empty_directory(self, tmp_path):
        assert discover(tmp_path) == []

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DataDirectoryError, match="not found"):
            discover(tmp_path / "missing")

    def test_path_is_a_file(self, tmp_path):
        _touch(tmp_path, "data_ibex.csv")

        with pytest.raises(DataDirectoryError, match="Not a directory"):
            discover(tmp_path / "data_ibex.csv")


class TestSuffixIndex:

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("data_ibex.csv", None),
            ("data_ibex2.csv", 2),
            ("data_ibex10.csv", 10),
            ("data_ibex(1).csv", 1),
            ("data_ibex (4).csv", 4),
            ("data_ibex_7.csv", 7),
            ("other.csv", None),
        ],
    )
    def test_suffix_index(self, name, expected):
        assert suffix_index(name) == expected
