"""Book — one catalogued title and its stock count.

A title is the unique key of a book. All stock for a title lives in a
single ``copies`` counter; the store never holds two books with the same
title.
"""

from __future__ import annotations

from numbers import Integral

from pydantic import BaseModel, ConfigDict, Field

from libstock.domain.errors import InvalidArgumentError


class Book(BaseModel):
    """A catalogued title.

    Mutable: borrow and return adjust
    ``copies`` in place on the instance handed out by the store, then
    save it back. Assignments are validated, so ``copies`` can never be
    driven below zero.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(min_length=1)
    copies: int = Field(default=0, ge=0)

    @property
    def is_available(self) -> bool:
        return self.copies > 0


def require_title(title: object) -> str:
    """Return *title* if it is non-blank text, else raise InvalidArgumentError."""
    if not isinstance(title, str) or not title.strip():
        msg = f"title must be non-empty text, got {title!r}"
        raise InvalidArgumentError(msg)
    return title


def require_positive_count(count: object) -> int:
    """Return *count* as int if it is a strictly positive integer.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(count, bool) or not isinstance(count, Integral):
        msg = f"count must be an integer, got {count!r}"
        raise InvalidArgumentError(msg)
    if count <= 0:
        msg = f"count must be positive, got {count}"
        raise InvalidArgumentError(msg)
    return int(count)
