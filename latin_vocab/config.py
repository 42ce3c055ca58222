import logging
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_DATABASE = BASE_DIR / "data" / "latin_vocabulary.sqlite3"


def get_database_locator() -> str:
    """
    Reads LATIN_VOCAB_DATABASE from env: a path to the SQLite file or a full
    SQLAlchemy URL. Falls back to the copy packaged under latin_vocab/data/.
    """
    return os.getenv("LATIN_VOCAB_DATABASE", str(DEFAULT_DATABASE))


def get_secret_key() -> str:
    # Only signs the session cookie holding the remembered chapters.
    return os.getenv("SECRET_KEY", "dev-secret-change-me")


def get_log_level() -> int:
    name = os.getenv("LATIN_VOCAB_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level=None):
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
