"""CLI commands for minerlog."""

import typer
from dotenv import load_dotenv

from ..const import BASE_DIR
from .errors_cmd import errors
from .stat_cmd import stat
from .tail_cmd import tail

# Load environment variables before creating the app
load_dotenv(BASE_DIR / ".env")

app = typer.Typer(help="Inspect the receipts and errors logged by the miner.")

# Register commands
app.command(help="Show the most recent solution receipts.")(tail)
app.command(help="Show logged submission errors.")(errors)
app.command(help="Display receipt and error statistics.")(stat)


@app.callback()
def main() -> None:
    """Inspection commands for minerlog."""
    pass


__all__ = ["app", "tail", "errors", "stat"]
