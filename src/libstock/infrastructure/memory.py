"""In-memory BookStore backed by a dict keyed on title."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from libstock.infrastructure.locks import TitleLocks

if TYPE_CHECKING:
    from collections.abc import Iterable
    from contextlib import AbstractContextManager

    from libstock.domain.book import Book

logger = logging.getLogger(__name__)


class InMemoryBookStore:
    """Process-local book store.

    ``find_book`` hands out a copy, so a caller owns the returned value
    until it saves it back; mutations that are never saved never show up
    in the store.
    """

    def __init__(
        self,
        books: Iterable[Book] = (),
        *,
        per_title_locking: bool = True,
    ) -> None:
        self._books: dict[str, Book] = {}
        self._locks = TitleLocks(enabled=per_title_locking)
        for book in books:
            self.save_book(book)

    def find_book(self, title: str) -> Book | None:
        book = self._books.get(title)
        return None if book is None else book.model_copy()

    def save_book(self, book: Book) -> None:
        self._books[book.title] = book.model_copy()
        logger.debug("Saved %r (%d copies)", book.title, book.copies)

    def list_all_books(self) -> list[Book]:
        return [book.model_copy() for book in self._books.values()]

    def lock_title(self, title: str) -> AbstractContextManager[None]:
        return self._locks.lock_title(title)

    def __len__(self) -> int:
        return len(self._books)
