"""Display receipt and error statistics."""

from pathlib import Path

import typer

from ..const import CONFIG_ENV, STORAGE_DIR_ENV
from ..stats import load_stats
from .common import open_store


def stat(
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
    top: int = typer.Option(
        20,
        "--top",
        min=0,
        help="Number of addresses to list in the per-address table.",
    ),
):
    """
    Display statistics for the receipts and errors logs.

    This command shows:
    - Receipt totals, split into user-earned and dev fee solutions
    - Error totals and the overall acceptance rate
    - Time span covered by the receipts
    - Receipt and error counts per wallet address
    """
    store = open_store(config, storage_dir)
    stats = load_stats(store)

    typer.echo("=" * 80)
    typer.echo(f"Mining log statistics: {store.root}")
    typer.echo("=" * 80)

    if stats.total_receipts == 0 and stats.total_errors == 0:
        typer.echo("No receipts or errors logged yet.")
        return

    typer.echo(f"Receipts:          {stats.total_receipts:,}")
    typer.echo(f"  user:            {stats.user_receipts:,}")
    typer.echo(f"  dev fee:         {stats.dev_fee_receipts:,}")
    typer.echo(f"Errors:            {stats.total_errors:,}")
    if stats.success_rate is not None:
        typer.echo(f"Acceptance rate:   {stats.success_rate:.1%}")
    typer.echo(f"Challenges solved: {stats.unique_challenges:,}")
    if stats.first_ts is not None:
        typer.echo(f"First receipt:     {stats.first_ts}")
        typer.echo(f"Last receipt:      {stats.last_ts}")

    typer.echo()
    typer.echo(f"Addresses ({stats.unique_addresses}):")
    typer.echo("-" * 80)
    for row in stats.per_address[:top]:
        index = "-" if row.address_index is None else str(row.address_index)
        typer.echo(f"{index:>4}  {row.address}  receipts={row.receipts}  errors={row.errors}")
    if stats.unique_addresses > top:
        typer.echo(f"... {stats.unique_addresses - top} more")
