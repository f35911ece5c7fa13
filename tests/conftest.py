"""Shared pytest fixtures and test helpers for libstock tests."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import create_autospec

import pytest
from sqlalchemy.engine import Engine

from libstock.domain.book import Book
from libstock.infrastructure.database.engine import init_database
from libstock.services.inventory import InventoryService
from libstock.services.ports import BookStore, MemberValidator, Notifier


@pytest.fixture
def book_store() -> BookStore:
    """Autospec double of the BookStore port. Holds no books by default."""
    store = create_autospec(BookStore, instance=True)
    store.find_book.return_value = None
    store.list_all_books.return_value = []
    return store


@pytest.fixture
def member_validator() -> MemberValidator:
    """Autospec double of the MemberValidator port. Accepts every member by default."""
    validator = create_autospec(MemberValidator, instance=True)
    validator.is_valid_member.return_value = True
    return validator


@pytest.fixture
def notifier() -> Notifier:
    return create_autospec(Notifier, instance=True)


@pytest.fixture
def service(
    book_store: BookStore,
    member_validator: MemberValidator,
    notifier: Notifier,
) -> InventoryService:
    return InventoryService(book_store, member_validator, notifier)


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "libstock.db")
    try:
        yield engine
    finally:
        engine.dispose()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def stock(store: BookStore, title: str, copies: int) -> Book:
    """Program an autospec store double to hand out one book for *title*."""
    book = Book(title=title, copies=copies)
    store.find_book.side_effect = lambda t: book if t == title else None
    return book
