# SPDX-License-Identifier: Apache-2.0
"""Conversion between Spanish formatted numbers and Python numbers.

The BME web renders numbers with ``.`` as thousands separator and ``,`` as
decimal separator (``19.808,76``). Parsing strips the grouping dots, swaps the
decimal comma for a radix point and keeps the full precision of the source.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Union

from .exceptions import InvalidNumberError

THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","

# Either well formed groups of three ("1.234.567") or a bare run of digits.
_INTEGER_PART = r"(?:[0-9]{1,3}(?:\.[0-9]{3})+|[0-9]+)"
_INTEGER_RE = re.compile(_INTEGER_PART)
_DECIMAL_RE = re.compile(_INTEGER_PART + r"(?:,[0-9]+)?")

# Swap both separators in a single pass.
_TO_LOCALE = str.maketrans({",": THOUSANDS_SEPARATOR, ".": DECIMAL_SEPARATOR})


def _normalize(text: str) -> str:
    return text.replace(THOUSANDS_SEPARATOR, "").replace(DECIMAL_SEPARATOR, ".")


def parse_decimal(text: str) -> Decimal:
    """Parse a locale formatted decimal such as ``"19.808,76"``.

    Args:
        text: Number as written in the source (``"13,0700"``, ``"1.234"``).

    Returns:
        Decimal with the exponent given in the source (``Decimal("13.0700")``).

    Raises:
        InvalidNumberError: If the text is not a non-negative locale number.
    """
    if not isinstance(text, str) or not _DECIMAL_RE.fullmatch(text):
        raise InvalidNumberError(f"Invalid decimal format: {text!r}")
    try:
        return Decimal(_normalize(text))
    except InvalidOperation as e:  # pragma: no cover - guarded by the regex
        raise InvalidNumberError(f"Invalid decimal format: {text!r}") from e


def parse_integer(text: str) -> int:
    """Parse a locale formatted integer such as ``"1.522.103"``.

    Raises:
        InvalidNumberError: If the text has a decimal part or is malformed.
    """
    if not isinstance(text, str) or not _INTEGER_RE.fullmatch(text):
        raise InvalidNumberError(f"Invalid integer format: {text!r}")
    return int(_normalize(text))


def format_decimal(value: Union[Decimal, int]) -> str:
    """Render a decimal with locale separators, keeping its own exponent."""
    return format(Decimal(value), ",f").translate(_TO_LOCALE)


def format_integer(value: int) -> str:
    """Render an integer with ``.`` grouping (``1522103`` -> ``1.522.103``)."""
    return format(int(value), ",d").translate(_TO_LOCALE)
