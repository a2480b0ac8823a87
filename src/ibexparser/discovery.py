# SPDX-License-Identifier: Apache-2.0
"""Discovery of pasted data files inside a directory.

Data files share a base name and an optional integer suffix, the way a
browser or a text editor names successive saves of the same page::

    data_ibex.csv, data_ibex(1).csv, data_ibex2.csv, data_ibex10.csv

Files are returned in ascending numeric suffix order with the unsuffixed base
file first. Ties (``data_ibex2.csv`` and ``data_ibex(2).csv``) are broken by
file name, and the base file sorts before a literal ``0`` suffix.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .exceptions import DataDirectoryError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DEFAULT_FILE_STEM = "data_ibex"
DEFAULT_FILE_EXT = "csv"


def _stem_pattern(file_stem: str) -> re.Pattern[str]:
    return re.compile(re.escape(file_stem) + r"(?:[ _\-]?(?:\(([0-9]+)\)|([0-9]+)))?")


def _match_suffix(path: Path, file_stem: str) -> Tuple[bool, Optional[int]]:
    match = _stem_pattern(file_stem).fullmatch(path.stem)
    if match is None:
        return False, None
    digits = match.group(1) or match.group(2)
    return True, int(digits) if digits is not None else None


def suffix_index(path: PathLike, file_stem: str = DEFAULT_FILE_STEM) -> Optional[int]:
    """Numeric suffix of a data file name, or None when it has none.

    Examples:
        >>> suffix_index("data_ibex10.csv")
        10
        >>> suffix_index("data_ibex(1).csv")
        1
        >>> suffix_index("data_ibex.csv") is None
        True
    """
    _, index = _match_suffix(Path(path), file_stem)
    return index


def _sort_key(path: Path, file_stem: str) -> Tuple[int, int, str]:
    index = suffix_index(path, file_stem)
    if index is None:
        return (0, 0, path.name)
    return (1, index, path.name)


def _normalize_ext(file_ext: str) -> str:
    return file_ext.lstrip(".").lower()


def discover(
    directory: PathLike,
    file_stem: str = DEFAULT_FILE_STEM,
    file_ext: str = DEFAULT_FILE_EXT,
) -> List[Path]:
    """List the data files of a directory in processing order.

    Args:
        directory: Directory to scan (not recursive).
        file_stem: Constant part of the file names, e.g. ``data_ibex``.
        file_ext: File extension without the dot, compared case-insensitively.

    Returns:
        Paths sorted by numeric suffix, base file first.

    Raises:
        DataDirectoryError: If the directory is missing or cannot be listed.
    """
    root = Path(directory)
    if not root.exists():
        raise DataDirectoryError(f"Data directory not found: {root}")
    if not root.is_dir():
        raise DataDirectoryError(f"Not a directory: {root}")

    ext = _normalize_ext(file_ext)
    try:
        candidates = list(root.iterdir())
    except OSError as e:
        raise DataDirectoryError(f"Cannot list data directory {root}: {e}") from e

    files = []
    for path in candidates:
        if not path.is_file():
            continue
        if _normalize_ext(path.suffix) != ext:
            continue
        matched, _ = _match_suffix(path, file_stem)
        if matched:
            files.append(path)

    files.sort(key=lambda p: _sort_key(p, file_stem))
    logger.debug("Discovered %d data file(s) in %s", len(files), root)
    return files
