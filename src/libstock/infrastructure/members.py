"""Allow-list MemberValidator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class AllowListMemberValidator:
    """A member is valid when its id is on the list (or *allow_all* is set)."""

    def __init__(self, allowed: Iterable[int] = (), *, allow_all: bool = False) -> None:
        self._allowed = frozenset(allowed)
        self._allow_all = allow_all

    def is_valid_member(self, member_id: int) -> bool:
        return self._allow_all or member_id in self._allowed
