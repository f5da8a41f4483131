"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger

from ..config import AppConfig, load_config
from ..const import DEFAULT_CONFIG_PATH
from ..log import setup_logging
from ..storage import ErrorRecord, LogRecord, LogStore, ReceiptRecord


def load_app_config(config: Path | None) -> AppConfig:
    """Load the given config file, or the default one when it exists."""
    if config is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return AppConfig()
        config = DEFAULT_CONFIG_PATH

    try:
        return load_config(AppConfig, config)
    except FileNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def open_store(config: Path | None, storage_dir: Path | None) -> LogStore:
    """Configure logging and open the store named by the CLI options."""
    app_config = load_app_config(config)
    setup_logging(app_config.logging)

    root = storage_dir if storage_dir is not None else app_config.storage.resolve_dir()
    logger.debug("Opening log store at {}", root)
    return LogStore(root)


def format_record(record: LogRecord, as_json: bool = False) -> str:
    """Render a record as a single display line."""
    if as_json:
        return record.to_json_line()

    address = record.address
    if record.address_index is not None:
        address = f"{address}[{record.address_index}]"
    parts = [record.ts, address, record.challenge_id, f"nonce={record.nonce}", f"hash={record.hash}"]

    if isinstance(record, ReceiptRecord):
        if record.is_dev_fee:
            parts.append("(dev fee)")
    elif isinstance(record, ErrorRecord):
        parts.append(f"error={record.error}")
    return "  ".join(parts)


__all__ = ["load_app_config", "open_store", "format_record"]
