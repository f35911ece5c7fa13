"""Pluggy hook specifications for libstock lending events.

Both hooks fire after the book's new copy count has been persisted.
"""

from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("libstock")
hookimpl = pluggy.HookimplMarker("libstock")


class LibstockHookSpec:
    """Hook specifications for the libstock plugin system."""

    @hookspec
    def post_borrow(self, member_id: int, title: str) -> None:
        """Called after a member borrowed a copy of *title*."""

    @hookspec
    def post_return(self, member_id: int, title: str) -> None:
        """Called after a member returned a copy of *title*."""
