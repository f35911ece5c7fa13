"""SQLAlchemy Core table definitions for the libstock database."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Integer, MetaData, Table, Text

metadata = MetaData()

books = Table(
    "books",
    metadata,
    Column("title", Text, primary_key=True),  # exact, case-sensitive key
    Column("copies", Integer, nullable=False, default=0, server_default="0"),
    CheckConstraint("copies >= 0", name="ck_books_copies_non_negative"),
)
