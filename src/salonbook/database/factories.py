"""Database factory functions for creating database instances."""

from typing import Optional

from salonbook.config import Settings, default_database_path
from salonbook.database.sqlalchemy_db import SQLAlchemyDatabase


def resolve_database_url(
    database_url: Optional[str] = None,
    database_path: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Pick the database URL to connect to.

    Precedence: explicit URL, explicit SQLite path, settings URL, settings
    path, then ~/.salonbook/salonbook.db.
    """
    if database_url:
        return database_url
    if database_path:
        return f"sqlite:///{database_path}"
    if settings is not None:
        if settings.database_url:
            return settings.database_url
        if settings.database_path:
            return f"sqlite:///{settings.database_path}"
    return f"sqlite:///{default_database_path()}"


def create_database(
    database_url: Optional[str] = None,
    database_path: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> SQLAlchemyDatabase:
    """Create a database instance.

    Args:
        database_url: SQLAlchemy URL. Takes precedence over everything else.
        database_path: Path to a SQLite database file.
        settings: Settings to read the URL/path and pool options from. If
            None, settings are read from the environment.

    Returns:
        SQLAlchemyDatabase instance
    """
    if settings is None:
        settings = Settings.from_env()
    url = resolve_database_url(database_url, database_path, settings)
    return SQLAlchemyDatabase(url, settings)


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks SALONBOOK_DB_PATH
            environment variable, then defaults to ~/.salonbook/salonbook.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    settings = Settings.from_env()
    if database_path is None:
        database_path = settings.database_path or default_database_path()
    return SQLAlchemyDatabase(f"sqlite:///{database_path}", settings)
