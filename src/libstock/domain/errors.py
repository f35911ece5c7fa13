"""Error taxonomy for inventory operations.

Validation and authorization problems are raised. Ordinary business misses
(unknown title, no copies left) are reported as ``False`` return values by
the service and never appear here.
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for errors raised by the inventory service."""


class InvalidArgumentError(InventoryError, ValueError):
    """Malformed input: blank title, non-positive or non-integral count."""


class UnauthorizedError(InventoryError, PermissionError):
    """The member failed validation and may not borrow."""

    def __init__(self, member_id: object) -> None:
        super().__init__(f"Member {member_id!r} is not allowed to borrow")
        self.member_id = member_id
