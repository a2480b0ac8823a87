# SPDX-License-Identifier: Apache-2.0
"""Parse command: discover data files, extract quotes and print them."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console

from ibexparser import __version__
from ibexparser.config import ConfigVersionError, ParserSettings, apply_overrides, load_config
from ibexparser.discovery import discover
from ibexparser.exceptions import DataDirectoryError, DataFileError
from ibexparser.formatting import filter_entries, write_entries
from ibexparser.parsing import StockExtractor

# Messages go to stderr; stdout only carries records.
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

logger = logging.getLogger(__name__)


def _fail(message: str, exc: Optional[BaseException] = None) -> NoReturn:
    err_console.print(f"❌ {message}", style="red", markup=False)
    raise typer.Exit(1) from exc


def _configure_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)-5s [%(name)s] %(message)s",
        stream=sys.stderr,
        force=True,  # Override any existing configuration
    )


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ibexparser {__version__}")
        raise typer.Exit()


def _load_settings(config: Optional[Path], **overrides) -> ParserSettings:
    try:
        settings = load_config(config) if config is not None else ParserSettings()
        return apply_overrides(settings, **overrides)
    except ConfigVersionError as e:
        _fail(f"Configuration version error: {e}", e)
    except FileNotFoundError as e:
        _fail(str(e), e)
    except ValueError as e:
        _fail(f"Invalid configuration: {e}", e)


def parse_command(
    path: Path = typer.Argument(..., help="Directory to search for text data files"),
    ticker: Optional[str] = typer.Argument(None, help="Company to filter the results"),
    file_stem: Optional[str] = typer.Option(
        None, "--file-stem", help="Name of the data files (default: data_ibex)"
    ),
    file_ext: Optional[str] = typer.Option(
        None, "--file-ext", help="Extension of the data files (default: csv)"
    ),
    target_date: Optional[str] = typer.Option(
        None, "--target-date", help="Only keep quotes from this day ('21' or '21/01/2023')"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write records to this file instead of stdout"
    ),
    skip_repeated: Optional[bool] = typer.Option(
        None,
        "--skip-repeated/--keep-repeated",
        help="Drop quotes whose time did not change since the previous file",
    ),
    ignore_case: Optional[bool] = typer.Option(
        None, "--ignore-case/--case-sensitive", help="Match the ticker filter ignoring case"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Number of files parsed in parallel"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    debug: bool = typer.Option(False, "--debug", help="Log debug details to stderr"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Parse Ibex 35 quotes pasted from the BME web into ';' separated records.

    Raw text files keep the layout of the BME price table: select the page
    content, paste it into a text file and point this command at the
    directory that holds it.

    Examples:
        ibexparser ./data
        ibexparser ./data AENA
        ibexparser ./data --target-date 06/02/2024 --skip-repeated > quotes.csv
    """
    _configure_logging(verbose, debug)

    settings = _load_settings(
        config,
        file_stem=file_stem,
        file_ext=file_ext,
        target_date=target_date,
        skip_repeated=skip_repeated,
        case_sensitive=None if ignore_case is None else not ignore_case,
        workers=workers,
    )

    try:
        files = discover(path, settings.file_stem, settings.file_ext)
    except DataDirectoryError as e:
        _fail(str(e), e)

    if not files:
        err_console.print(
            f"No {settings.file_stem}*.{settings.file_ext} files found in {path}",
            style="yellow",
            markup=False,
        )
        return

    extractor = StockExtractor.from_settings(settings)
    try:
        entries = extractor.extract(files)
    except DataFileError as e:
        _fail(str(e), e)

    for empty in extractor.empty_files:
        err_console.print(f"File {empty.name} doesn't contain valid data.", markup=False)

    wanted = ticker.strip() if ticker is not None else None
    entries = filter_entries(entries, wanted, case_sensitive=settings.case_sensitive)

    if output is None:
        write_entries(entries, sys.stdout, settings.separator)
        return

    try:
        with open(output, "w", encoding="utf-8") as stream:
            count = write_entries(entries, stream, settings.separator)
    except OSError as e:
        _fail(f"Cannot write {output}: {e}", e)
    logger.info("Wrote %d record(s) to %s", count, output)
