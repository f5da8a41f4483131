from pathlib import Path

BASE_DIR = Path.cwd()
DEFAULT_CONFIG_PATH = BASE_DIR / "minerlog.toml"
DEFAULT_STORAGE_DIR = Path("storage")

RECEIPTS_FILENAME = "receipts.jsonl"
ERRORS_FILENAME = "errors.jsonl"

CONFIG_ENV = "MINERLOG_CONFIG"
STORAGE_DIR_ENV = "MINERLOG_STORAGE_DIR"
