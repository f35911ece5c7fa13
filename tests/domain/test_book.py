"""Tests for the Book model and input guards."""

import pytest
from pydantic import ValidationError

from libstock.domain.book import Book, require_positive_count, require_title
from libstock.domain.errors import InvalidArgumentError, InventoryError, UnauthorizedError


class TestBook:
    def test_defaults(self) -> None:
        book = Book(title="1984")
        assert book.copies == 0
        assert book.is_available is False

    def test_is_available(self) -> None:
        assert Book(title="1984", copies=1).is_available is True

    def test_mutation_in_place(self) -> None:
        book = Book(title="1984", copies=2)
        book.copies -= 1
        assert book.copies == 1

    def test_negative_copies_rejected_on_assignment(self) -> None:
        book = Book(title="1984", copies=0)
        with pytest.raises(ValidationError):
            book.copies -= 1
        assert book.copies == 0

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Book(title="", copies=1)


class TestRequireTitle:
    @pytest.mark.parametrize("title", ["", " ", "\t\n", None, 42])
    def test_rejects(self, title: object) -> None:
        with pytest.raises(InvalidArgumentError):
            require_title(title)

    def test_returns_title_unchanged(self) -> None:
        assert require_title(" Dune ") == " Dune "


class TestRequirePositiveCount:
    @pytest.mark.parametrize("count", [0, -5, 1.5, 3.0, True, None, "2"])
    def test_rejects(self, count: object) -> None:
        with pytest.raises(InvalidArgumentError):
            require_positive_count(count)

    def test_accepts_positive_int(self) -> None:
        assert require_positive_count(7) == 7


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(InvalidArgumentError, InventoryError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(UnauthorizedError, InventoryError)
        assert issubclass(UnauthorizedError, PermissionError)

    def test_unauthorized_carries_member(self) -> None:
        err = UnauthorizedError(12)
        assert err.member_id == 12
        assert "12" in str(err)
