"""SQLite book store, schema, and engine setup via SQLAlchemy Core."""

from libstock.infrastructure.database.engine import create_db_engine, init_database
from libstock.infrastructure.database.schema import books, metadata
from libstock.infrastructure.database.store import SqlBookStore

__all__ = [
    "SqlBookStore",
    "books",
    "create_db_engine",
    "init_database",
    "metadata",
]
