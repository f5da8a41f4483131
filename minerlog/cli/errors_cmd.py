"""Show logged submission errors."""

from pathlib import Path

import typer

from ..const import CONFIG_ENV, STORAGE_DIR_ENV
from .common import format_record, open_store


def errors(
    count: int | None = typer.Option(
        None,
        "--count",
        "-n",
        min=0,
        help="Only show the last N errors. Shows all errors when omitted.",
    ),
    storage_dir: Path | None = typer.Option(
        None,
        "--dir",
        "-d",
        envvar=STORAGE_DIR_ENV,
        help="Directory holding receipts.jsonl and errors.jsonl.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        envvar=CONFIG_ENV,
        help="Path to the configuration TOML file.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the stored JSON lines instead of a formatted view.",
    ),
):
    """Print logged submission errors, oldest first."""
    store = open_store(config, storage_dir)
    records = store.read_all_errors()
    if count is not None:
        records = records[-count:] if count else []

    if not records:
        typer.echo(f"No errors logged yet in {store.errors_path}")
        return

    for record in records:
        typer.echo(format_record(record, as_json=as_json))
