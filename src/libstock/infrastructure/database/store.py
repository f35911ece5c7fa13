"""SqlBookStore — BookStore over the ``books`` table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert

from libstock.domain.book import Book
from libstock.infrastructure.database.schema import books
from libstock.infrastructure.locks import TitleLocks

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class SqlBookStore:
    """Book store on a SQLAlchemy engine.

    Writes run in their own ``engine.begin()`` transaction. Books read
    from the database are fresh instances owned by the caller.
    """

    def __init__(self, engine: Engine, *, per_title_locking: bool = True) -> None:
        self._engine = engine
        self._locks = TitleLocks(enabled=per_title_locking)

    def find_book(self, title: str) -> Book | None:
        with self._engine.connect() as conn:
            row = conn.execute(
                select(books.c.title, books.c.copies).where(books.c.title == title)
            ).first()
        if row is None:
            return None
        return Book(title=row.title, copies=row.copies)

    def save_book(self, book: Book) -> None:
        """Insert or replace the row for ``book.title``."""
        stmt = insert(books).values(title=book.title, copies=book.copies)
        stmt = stmt.on_conflict_do_update(
            index_elements=[books.c.title],
            set_={"copies": stmt.excluded.copies},
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)
        logger.debug("Saved %r (%d copies)", book.title, book.copies)

    def list_all_books(self) -> list[Book]:
        with self._engine.connect() as conn:
            rows = conn.execute(
                select(books.c.title, books.c.copies).order_by(books.c.title)
            ).fetchall()
        return [Book(title=row.title, copies=row.copies) for row in rows]

    def lock_title(self, title: str) -> AbstractContextManager[None]:
        return self._locks.lock_title(title)

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        self._engine.dispose()
