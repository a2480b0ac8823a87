# SPDX-License-Identifier: Apache-2.0
"""File extraction: feed pasted text files through the line parser."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import time
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence, Union

from ..domain import StockEntry
from ..exceptions import DataFileError
from .line_parser import DEFAULT_LAYOUTS, RowLayout, parse_lines

if TYPE_CHECKING:
    from ..config import ParserSettings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_text(text: str, layouts: Sequence[RowLayout] = DEFAULT_LAYOUTS) -> List[StockEntry]:
    """Parse the whole content of a pasted file. An empty list is a valid result."""
    return parse_lines(text.splitlines(), layouts)


def parse_file(
    path: PathLike,
    encoding: str = "utf-8",
    layouts: Sequence[RowLayout] = DEFAULT_LAYOUTS,
) -> List[StockEntry]:
    """Read a text file and return the entries found in it, in file order.

    Raises:
        DataFileError: If the file cannot be read.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding, errors="replace")
    except OSError as e:
        raise DataFileError(f"Cannot read data file {file_path}: {e}") from e

    entries = parse_text(text, layouts)
    if entries:
        logger.debug("Parsed %d entries from %s", len(entries), file_path.name)
    else:
        logger.info("File %s contains no valid data", file_path.name)
    return entries


class StockExtractor:
    """Parse a sequence of data files and concatenate their entries.

    Files are read in the order given by the caller. Two optional filters
    work across the whole sequence:

    - target day: keep only quotes whose date falls on that day of month.
    - skip repeated: drop a quote when its ticker's last emitted quote has
      the same time, which happens when the page is pasted again before the
      stock trades.
    """

    def __init__(
        self,
        *,
        encoding: str = "utf-8",
        min_file_bytes: int = 0,
        target_day: Optional[int] = None,
        skip_repeated: bool = False,
        workers: int = 1,
        layouts: Sequence[RowLayout] = DEFAULT_LAYOUTS,
    ) -> None:
        self.encoding = encoding
        self.min_file_bytes = min_file_bytes
        self.target_day = target_day
        self.skip_repeated = skip_repeated
        self.workers = max(1, workers)
        self.layouts = tuple(layouts)
        self.empty_files: List[Path] = []

    @classmethod
    def from_settings(cls, settings: ParserSettings) -> StockExtractor:
        return cls(
            encoding=settings.encoding,
            min_file_bytes=settings.min_file_bytes,
            target_day=settings.target_date,
            skip_repeated=settings.skip_repeated,
            workers=settings.workers,
        )

    def _is_too_small(self, path: Path) -> bool:
        if self.min_file_bytes <= 0:
            return False
        try:
            size = path.stat().st_size
        except OSError as e:
            raise DataFileError(f"Cannot read data file {path}: {e}") from e
        if size < self.min_file_bytes:
            logger.info(
                "Skipping %s: %d bytes is below the %d byte minimum",
                path.name,
                size,
                self.min_file_bytes,
            )
            return True
        return False

    def _read(self, path: Path) -> Optional[List[StockEntry]]:
        if self._is_too_small(path):
            return None
        return parse_file(path, self.encoding, self.layouts)

    def extract(self, files: Iterable[PathLike]) -> List[StockEntry]:
        """Parse every file and return all entries in file order."""
        paths = [Path(f) for f in files]
        self.empty_files = []

        if self.workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                # map() yields in submission order, not completion order
                per_file = list(executor.map(self._read, paths))
        else:
            per_file = [self._read(path) for path in paths]

        last_seen: Dict[str, time] = {}
        entries: List[StockEntry] = []
        for path, file_entries in zip(paths, per_file):
            if file_entries is None:
                continue
            if not file_entries:
                self.empty_files.append(path)
                continue
            for entry in file_entries:
                if self.target_day is not None and entry.date.day != self.target_day:
                    continue
                if self.skip_repeated:
                    if last_seen.get(entry.ticker) == entry.time:
                        continue
                    last_seen[entry.ticker] = entry.time
                entries.append(entry)

        logger.info("Extracted %d entries from %d file(s)", len(entries), len(paths))
        return entries
