"""Typer-based command line interface for bundle generation.

The ``build`` command reads an application record (``.json``, ``.yml`` or
``.yaml``), assembles the cover letter, justification and CV and writes the
combined PDF plus the three parts into an output directory.

Exit codes
----------
0 success
2 usage error (bad ``--date``)
3 I/O error (missing input, unsupported extension, filesystem issues)
4 configuration error
5 build error (invalid record, font or encoding failure)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .bundle import assemble_bundle
from .config import load_config
from .io import read_record, write_file
from .utils.datefmt import parse_iso_date
from .utils.errors import CollaboratorError, RecordError, UnsupportedFormatError
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="kdvbundle",
    help="Generate the conscientious objection PDF bundle. Use 'kdvbundle build'.",
)


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


@app.callback()
def main() -> None:
    """Entry point for the kdvbundle command group."""
    pass


@app.command()
def build(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Application record (.json, .yml, .yaml)"
    ),
    out_dir: Path = typer.Option(..., "--out-dir", help="Directory for the PDFs"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    on_date: Optional[str] = typer.Option(  # noqa: B008
        None, "--date", help="Date printed on the cover letter (YYYY-MM-DD)"
    ),
    bundle_name: Optional[str] = typer.Option(  # noqa: B008
        None, "--bundle-name", help="File name of the combined PDF"
    ),
    write_parts: bool = typer.Option(  # noqa: B008
        True, "--parts/--no-parts", help="Also write the three individual PDFs"
    ),
    parallel: bool | None = typer.Option(  # noqa: B008
        None, "--parallel/--sequential", help="Override bundle.parallel"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> dict[str, str]:
    """Build the PDF bundle for the record at ``in_path``."""

    configure_logging(verbose)

    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])

    today = None
    if on_date is not None:
        today = parse_iso_date(on_date)
        if today is None:
            _safe_exit(2, f"Invalid --date {on_date!r}; expected YYYY-MM-DD")

    try:
        record = read_record(in_path)
    except (FileNotFoundError, UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))
    except RecordError as exc:
        _safe_exit(5, str(exc))
    if verbose:
        typer.echo(f"Read record for {record.personal.full_name or '(unnamed)'}", err=True)

    try:
        bundle = assemble_bundle(record, cfg, today=today, parallel=parallel)
    except CollaboratorError as exc:
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)

    written: dict[str, str] = {}
    targets = [(bundle_name or bundle.bundle_filename, bundle.bundle_bytes)]
    if write_parts:
        targets.extend((part.name, part.data) for part in bundle.parts)
    try:
        for name, data in targets:
            path = out_dir / name
            write_file(path, data)
            written[name] = str(path)
    except (UnsupportedFormatError, OSError) as exc:
        _safe_exit(3, str(exc))

    for path in written.values():
        typer.echo(path)
    return written
