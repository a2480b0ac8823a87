# SPDX-License-Identifier: Apache-2.0
"""ibexparser command line interface."""

from __future__ import annotations

import typer

from .parse import parse_command

app = typer.Typer(
    add_completion=False,
    help="Parser for Ibex 35 stock data pasted from the BME web.",
)

app.command(name="parse")(parse_command)


if __name__ == "__main__":
    app()
