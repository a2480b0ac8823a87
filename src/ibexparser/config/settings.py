# SPDX-License-Identifier: Apache-2.0
"""Pydantic configuration model for parsing runs."""

from __future__ import annotations

import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Configuration versioning constants
CURRENT_CONFIG_VERSION = "1"
MIN_SUPPORTED_VERSION = "1"

_DAY_RE = re.compile(r"([0-9]{1,2})(?:/[0-9]{1,2}/[0-9]{4})?")


class ParserSettings(BaseModel):
    """Settings for discovering, parsing and rendering data files.

    Loaded from YAML with snake_case or kebab-case keys; CLI flags override
    individual values.
    """

    model_config = ConfigDict(extra="forbid")  # Reject unknown keys

    config_version: str = Field(
        default=CURRENT_CONFIG_VERSION, description="Configuration schema version"
    )
    file_stem: str = Field(
        default="data_ibex", min_length=1, description="Constant part of the data file names"
    )
    file_ext: str = Field(default="csv", description="Extension of the data files")
    encoding: str = Field(default="utf-8", description="Text encoding of the data files")
    separator: str = Field(default=";", description="Field separator of the output lines")
    min_file_bytes: int = Field(
        default=0, ge=0, description="Files smaller than this are skipped (0 disables)"
    )
    target_date: Optional[int] = Field(
        default=None,
        description="Only keep quotes from this day of month ('21' or '21/01/2023')",
    )
    case_sensitive: bool = Field(default=True, description="Match the ticker filter exactly")
    skip_repeated: bool = Field(
        default=False, description="Drop quotes whose time did not change since the last file"
    )
    workers: int = Field(default=1, ge=1, le=32, description="Files parsed in parallel")

    @field_validator("file_ext")
    @classmethod
    def validate_file_ext(cls, v: str) -> str:
        """Strip a leading dot and lowercase the extension."""
        ext = v.strip().lstrip(".").lower()
        if not ext:
            raise ValueError("file_ext cannot be empty")
        return ext

    @field_validator("separator")
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Separators must not clash with the numeric format."""
        if len(v) != 1 or v.isspace() or v in {",", "."}:
            raise ValueError(f"Invalid separator: {v!r}. Use a single character other than ',' or '.'")
        return v

    @field_validator("target_date", mode="before")
    @classmethod
    def validate_target_date(cls, v: Any) -> Optional[int]:
        """Reduce a target date to its day of month; month and year are ignored."""
        if v is None:
            return None
        if isinstance(v, bool):
            raise ValueError(f"Invalid target date: {v!r}")
        if isinstance(v, int):
            day = v
        else:
            match = _DAY_RE.fullmatch(str(v).strip())
            if match is None:
                raise ValueError(f"Invalid target date: {v!r}. Use 'DD' or 'DD/MM/YYYY'")
            day = int(match.group(1))
        if not 1 <= day <= 31:
            raise ValueError(f"Invalid target day: {day}")
        return day
