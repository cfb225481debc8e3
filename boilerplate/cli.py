# Program: Boilerplate CLI
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

"""Command line entry point: print a file header or prepend it in place."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.markup import escape

from .categories import render_header
from .config import HeaderDefaults, YEAR_ENV_VAR, build_configuration, load_defaults
from .errors import BoilerplateError, UnrecognizedFileTypeError
from .licensing import available_licenses
from .logging_config import setup_logging
from .writer import write_in_place, write_stream

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
err_console = Console(stderr=True, highlight=False)
logger = logging.getLogger(__name__)


def _list_licenses(value: bool) -> None:
    if not value:
        return
    for spec in available_licenses():
        aliases = ", ".join(spec.aliases)
        typer.echo(f"{spec.key:<8} {spec.title}" + (f" (aliases: {aliases})" if aliases else ""))
    raise typer.Exit()


@app.command()
def generate(
    filename: Path = typer.Argument(..., metavar="FILENAME", help="File whose type selects the header style."),
    copyright_holder: Optional[str] = typer.Option(
        None, "--copyright", "-c", metavar="HOLDER", help="Copyright holder (default: Google Inc.)"
    ),
    license_name: Optional[str] = typer.Option(
        None, "--license", "-l", metavar="NAME", help="License name or alias (default: apache)"
    ),
    in_place: bool = typer.Option(False, "--in-place", "-i", help="Prepend the header to FILENAME."),
    separator: bool = typer.Option(False, "--separator", help="Rule off the license from the file comment."),
    silent: bool = typer.Option(False, "--silent", "-s", help="Exit quietly on unrecognized file types."),
    year: Optional[str] = typer.Option(
        None, "--year", "-y", metavar="YEAR", envvar=YEAR_ENV_VAR, help="Copyright year (default: current year)"
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", metavar="PATH", help="YAML file with defaults."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    list_licenses: bool = typer.Option(
        False, "--list-licenses", is_eager=True, callback=_list_licenses, help="Show supported licenses and exit."
    ),
) -> None:
    """Generate a license header for FILENAME in its comment syntax."""

    setup_logging(verbose)
    try:
        defaults = load_defaults(config_file) if config_file is not None else HeaderDefaults()
        config = build_configuration(
            defaults,
            copyright_holder=copyright_holder,
            license_name=license_name,
            year=year,
            in_place=in_place,
            silent=silent,
            ruled_separator=separator,
        )
        if config.in_place:
            write_in_place(filename, config)
        else:
            write_stream(render_header(filename, config))
    except UnrecognizedFileTypeError as exc:
        if silent:
            logger.debug("Skipping %s: %s", filename, exc)
            return
        err_console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except BoilerplateError as exc:
        err_console.print(f"[red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and map every failure to exit status 1.

    typer prints usage errors itself in standalone mode; only the exit status
    is translated, since click uses 2 for usage errors.
    """
    try:
        app(args=list(argv) if argv is not None else None, prog_name="boilerplate")
    except SystemExit as exc:
        return 0 if exc.code in (None, 0) else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())


# Created by Dr. Z. Bakhtiyorov
