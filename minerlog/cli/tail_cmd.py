"""Show the most recent receipts."""

from pathlib import Path

import typer

from ..const import CONFIG_ENV, STORAGE_DIR_ENV
from .common import format_record, open_store


def tail(
    count: int = typer.Option(
        10,
        "--count",
        "-n",
        min=0,
        help="Number of most recent receipts to show.",
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
    """
    Print the last N receipts, oldest first.

    Parameters:
        count (int): How many receipts to show.
        storage_dir (Path | None): Overrides the storage directory from the config.
        config (Path | None): Path to the configuration TOML file.
        as_json (bool): Print raw JSON lines.
    """
    store = open_store(config, storage_dir)
    receipts = store.read_recent_receipts(count)

    if not receipts:
        typer.echo(f"No receipts logged yet in {store.receipts_path}")
        return

    for receipt in receipts:
        typer.echo(format_record(receipt, as_json=as_json))
