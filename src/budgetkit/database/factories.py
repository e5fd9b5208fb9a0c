"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional, Union

from budgetkit.config import DB_PATH_ENV
from budgetkit.database.sqlalchemy_db import SQLAlchemyDatabase

DEFAULT_DATA_DIR = Path.home() / ".budgetkit"
DEFAULT_DB_NAME = "budgetkit.db"


def resolve_database_path(database_path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve where the ledger file lives.

    Order: explicit path, BUDGETKIT_DB_PATH, ~/.budgetkit/budgetkit.db.
    The default data directory is created on first use; "~" is expanded.
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if not database_path:
        DEFAULT_DATA_DIR.mkdir(parents=True, exist_ok=True)
        return DEFAULT_DATA_DIR / DEFAULT_DB_NAME

    return Path(database_path).expanduser()


def create_sqlite_database(
    database_path: Optional[Union[str, Path]] = None,
) -> SQLAlchemyDatabase:
    """Create a SQLite-backed ledger.

    Args:
        database_path: Path to the SQLite file; see resolve_database_path

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(f"sqlite:///{resolve_database_path(database_path)}")
