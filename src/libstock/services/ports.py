"""Capability interfaces consumed by :class:`InventoryService`.

All collaborators are typed against these protocols, never against the
concrete adapters in ``libstock.infrastructure`` or ``libstock.plugins``.
"""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from libstock.domain.book import Book


class BookStore(Protocol):
    """Persistence for books, keyed by exact title."""

    def find_book(self, title: str) -> Book | None:
        """Return the book stored under *title*, or None."""
        ...

    def save_book(self, book: Book) -> None:
        """Persist *book* as a full replacement of its title's record."""
        ...

    def list_all_books(self) -> Sequence[Book]:
        """Return every catalogued book."""
        ...


@runtime_checkable
class TitleLocking(Protocol):
    """Optional store capability: serialize work on a single title."""

    def lock_title(self, title: str) -> AbstractContextManager[object]:
        """Return a context manager held for one read-modify-write on *title*."""
        ...


class MemberValidator(Protocol):
    def is_valid_member(self, member_id: int) -> bool: ...


class Notifier(Protocol):
    """Announces completed lending events. Delivery is the notifier's concern."""

    def notify_borrow(self, member_id: int, title: str) -> None: ...

    def notify_return(self, member_id: int, title: str) -> None: ...
