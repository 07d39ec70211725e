"""Database layer for salonbook application."""

from salonbook.database.base import Database, SQLExecutor
from salonbook.database.errors import StoreError
from salonbook.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "SQLExecutor", "StoreError", "create_database", "create_sqlite_database"]
