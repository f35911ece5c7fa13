"""Tests for AllowListMemberValidator."""

from libstock.infrastructure.members import AllowListMemberValidator


class TestAllowListMemberValidator:
    def test_listed_member_is_valid(self) -> None:
        assert AllowListMemberValidator([1, 2]).is_valid_member(2) is True

    def test_unlisted_member_is_invalid(self) -> None:
        assert AllowListMemberValidator([1, 2]).is_valid_member(3) is False

    def test_empty_list_rejects_everyone(self) -> None:
        assert AllowListMemberValidator().is_valid_member(1) is False

    def test_allow_all(self) -> None:
        assert AllowListMemberValidator(allow_all=True).is_valid_member(999) is True
