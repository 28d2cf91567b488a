import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Directory holding the database file, relative to the working directory
DATA_DIR = Path("data")

DB_FILE_NAME = "todo.json"


def load_env(env_path=None) -> bool:
    """
    Load `.env` from the working directory (or `env_path`) into os.environ.
    Real environment variables win. Importing the package never calls this.
    """
    env_path = Path(env_path) if env_path else Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(dotenv_path=str(env_path), override=False)


def default_db_file_name() -> Path:
    """Backing JSON file used when a store is created without a path."""
    return Path((os.getenv("TODO_DB_FILE") or "").strip() or DATA_DIR / DB_FILE_NAME)


def log_level() -> str:
    return (os.getenv("TODO_LOG_LEVEL") or "INFO").strip().upper()


def configure_logging(level=None):
    """Send log records to stderr. Meant for the host process, not the store."""
    logging.basicConfig(stream=sys.stderr, level=level or log_level())
