"""InventoryService — stock, borrowing, returns, and availability.

Pipeline for every mutating operation: VALIDATE → LOOKUP → DECIDE → PERSIST → NOTIFY

INVARIANT: A rejected operation (invalid input, unauthorized member, unknown
title, no copies left) never reaches ``save_book`` or the notifier.
INVARIANT: Notification fires only after the mutated book was persisted, and
after the per-title lock is released, so a notifier may call back in.
"""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext
from typing import TYPE_CHECKING

from libstock.domain.book import Book, require_positive_count, require_title
from libstock.domain.errors import UnauthorizedError
from libstock.services.ports import TitleLocking

if TYPE_CHECKING:
    from libstock.services.ports import BookStore, MemberValidator, Notifier

logger = logging.getLogger(__name__)


class InventoryService:
    """Business rules for the library catalogue.

    Collaborators are injected at construction and never replaced. The
    service holds no state of its own; every call reads the store afresh.

    Usage::

        service = InventoryService(store, members, notifier)
        service.add_stock("1984", 3)
        if service.borrow(member_id, "1984"):
            ...
    """

    def __init__(
        self,
        store: BookStore,
        members: MemberValidator,
        notifier: Notifier,
    ) -> None:
        self._store = store
        self._members = members
        self._notifier = notifier

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_stock(self, title: str, count: int) -> Book:
        """Add *count* copies of *title*, creating the book on first add.

        Raises:
            InvalidArgumentError: If *title* is blank or *count* is not a
                positive integer. Nothing is read or written in that case.
        """
        title = require_title(title)
        count = require_positive_count(count)

        with self._title_guard(title):
            book = self._store.find_book(title)
            if book is None:
                book = Book(title=title, copies=count)
            else:
                book.copies += count
            self._store.save_book(book)

        logger.info("Stock added: %r +%d (now %d)", title, count, book.copies)
        return book

    def borrow(self, member_id: int, title: str) -> bool:
        """Lend one copy of *title* to *member_id*.

        Returns False when the title is unknown or has no copies left.

        Raises:
            UnauthorizedError: If the member fails validation. The store is
                not consulted.
        """
        if not self._members.is_valid_member(member_id):
            logger.debug("Borrow rejected: member %r is not valid", member_id)
            raise UnauthorizedError(member_id)

        with self._title_guard(title):
            book = self._store.find_book(title)
            if book is None:
                logger.debug("Borrow miss: %r is not catalogued", title)
                return False
            if book.copies <= 0:
                logger.debug("Borrow miss: %r has no copies left", title)
                return False

            book.copies -= 1
            self._store.save_book(book)

        self._notifier.notify_borrow(member_id, title)
        logger.info("Borrowed: %r by member %r (%d left)", title, member_id, book.copies)
        return True

    def return_book(self, member_id: int, title: str) -> bool:
        """Take back one copy of *title* from *member_id*.

        Member validity is not checked: a return is accepted whenever the
        title is catalogued. Returns False for an unknown title.
        """
        with self._title_guard(title):
            book = self._store.find_book(title)
            if book is None:
                logger.debug("Return miss: %r is not catalogued", title)
                return False

            book.copies += 1
            self._store.save_book(book)

        self._notifier.notify_return(member_id, title)
        logger.info("Returned: %r by member %r (%d now)", title, member_id, book.copies)
        return True

    def list_available(self) -> list[Book]:
        """Books with at least one copy on the shelf, in store order."""
        return [book for book in self._store.list_all_books() if book.copies > 0]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _title_guard(self, title: str) -> AbstractContextManager[object]:
        """Per-title lock when the store offers one, otherwise a no-op."""
        if isinstance(self._store, TitleLocking):
            return self._store.lock_title(title)
        return nullcontext()
