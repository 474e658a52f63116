"""Tests for ChannelResolver."""

from pathlib import Path
from unittest.mock import MagicMock
from urllib.error import URLError

import pytest
from slack_sdk.errors import SlackApiError

from slackleave.application.use_cases import ChannelResolver
from slackleave.config import LeaveConfig
from slackleave.domain.entities import Channel, User
from slackleave.domain.exceptions import ChannelLookupError, TargetListError

_USERS = {
    "U_ME": User(id="U_ME", name="alice"),
    "U_BOB": User(id="U_BOB", name="bob"),
    "U_CAROL": User(id="U_CAROL", name="carol"),
}


def _api_error(code: str) -> SlackApiError:
    return SlackApiError(message=code, response={"error": code})


class TestChannelResolver:
    """ChannelResolver tests."""

    @pytest.fixture
    def targets_file(self, tmp_path: Path) -> Path:
        """Create the target channel file."""
        path = tmp_path / ".leave"
        path.write_text("general\nrandom\n")
        return path

    @pytest.fixture
    def members(self) -> dict[str, list[str]]:
        """Member IDs per channel ID."""
        return {
            "C001": ["U_BOB", "U_ME"],
            "C002": ["U_BOB", "U_CAROL"],
            "C003": ["U_ME"],
        }

    @pytest.fixture
    def mock_service(self, members: dict[str, list[str]]) -> MagicMock:
        """Create mock ChannelService."""
        service = MagicMock()
        service.list_channels.return_value = [
            Channel(id="C001", name="general"),
            Channel(id="C002", name="random"),
            Channel(id="C003", name="dev"),
        ]
        service.get_members.side_effect = lambda channel_id: members[channel_id]
        service.get_user.side_effect = lambda user_id: _USERS[user_id]
        return service

    @pytest.fixture
    def resolver(self, mock_service: MagicMock, targets_file: Path) -> ChannelResolver:
        """Create resolver instance."""
        return ChannelResolver(
            mock_service,
            LeaveConfig(myself="alice", channels_file=str(targets_file)),
        )

    def test_keeps_only_channels_with_identity(
        self, resolver: ChannelResolver
    ) -> None:
        """general (member) is kept, random (not a member) is excluded."""
        channels = resolver.resolve()

        assert [ch.name for ch in channels] == ["general"]
        assert channels[0].members == ("U_BOB", "U_ME")

    def test_untargeted_channels_are_not_inspected(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """Channels absent from the target file are never looked at."""
        resolver.resolve()

        fetched = [c.args[0] for c in mock_service.get_members.call_args_list]
        assert fetched == ["C001", "C002"]

    def test_unknown_target_names_are_ignored(
        self, mock_service: MagicMock, tmp_path: Path
    ) -> None:
        """Names missing from Slack produce no error and no result."""
        path = tmp_path / ".leave"
        path.write_text("does-not-exist\n")
        resolver = ChannelResolver(
            mock_service, LeaveConfig(myself="alice", channels_file=str(path))
        )

        assert resolver.resolve() == []
        mock_service.get_members.assert_not_called()

    def test_result_follows_remote_order(
        self, mock_service: MagicMock, tmp_path: Path
    ) -> None:
        """Resolution order is the order Slack lists channels in."""
        path = tmp_path / ".leave"
        path.write_text("dev\ngeneral\ndev\n")
        resolver = ChannelResolver(
            mock_service, LeaveConfig(myself="alice", channels_file=str(path))
        )

        assert [ch.name for ch in resolver.resolve()] == ["general", "dev"]

    def test_first_match_short_circuits(
        self, mock_service: MagicMock, members: dict[str, list[str]]
    ) -> None:
        """Members after the identity are not looked up."""
        members["C001"] = ["U_ME", "U_BOB", "U_CAROL"]
        resolver = ChannelResolver(mock_service, LeaveConfig(myself="alice"))

        assert resolver.is_member(Channel("C001", "general", tuple(members["C001"])))
        mock_service.get_user.assert_called_once_with("U_ME")

    def test_user_lookup_failure_skips_channel(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A failed user lookup counts as not a member."""

        def get_user(user_id: str) -> User:
            if user_id == "U_BOB":
                raise _api_error("user_not_found")
            return _USERS[user_id]

        mock_service.get_user.side_effect = get_user

        assert resolver.resolve() == []

    def test_user_lookup_connection_error_skips_channel(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A transport failure during user lookup counts as not a member."""
        mock_service.get_user.side_effect = URLError("connection refused")

        assert resolver.resolve() == []

    def test_user_lookups_are_cached(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """Each user is fetched once per run."""
        resolver.resolve()

        looked_up = [c.args[0] for c in mock_service.get_user.call_args_list]
        assert sorted(looked_up) == ["U_BOB", "U_CAROL", "U_ME"]

    def test_failed_lookups_are_not_cached(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A lookup that failed is retried by the next channel."""
        mock_service.get_user.side_effect = [_api_error("fatal_error"), _USERS["U_BOB"]]
        channel = Channel("C001", "general", ("U_BOB",))

        assert resolver.is_member(channel) is False
        assert resolver.is_member(channel) is False
        assert mock_service.get_user.call_count == 2

    def test_channel_without_members(self, resolver: ChannelResolver) -> None:
        """An empty member list means not a member."""
        assert resolver.is_member(Channel("C009", "empty")) is False

    def test_missing_target_file_raises(self, mock_service: MagicMock) -> None:
        """Target file errors abort before any remote call."""
        resolver = ChannelResolver(
            mock_service,
            LeaveConfig(myself="alice", channels_file="/nonexistent/.leave"),
        )

        with pytest.raises(TargetListError):
            resolver.resolve()
        mock_service.list_channels.assert_not_called()

    def test_channel_list_failure_raises(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A channel list failure aborts the resolution."""
        mock_service.list_channels.side_effect = _api_error("invalid_auth")

        with pytest.raises(ChannelLookupError):
            resolver.resolve()

    def test_channel_list_connection_error_raises(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A transport failure while listing channels is wrapped."""
        mock_service.list_channels.side_effect = URLError("connection refused")

        with pytest.raises(ChannelLookupError):
            resolver.resolve()

    def test_member_list_connection_error_raises(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A transport failure while fetching members is wrapped."""
        mock_service.get_members.side_effect = URLError("connection refused")

        with pytest.raises(ChannelLookupError):
            resolver.resolve()

    def test_member_list_failure_raises(
        self, resolver: ChannelResolver, mock_service: MagicMock
    ) -> None:
        """A member list failure aborts the resolution."""
        mock_service.get_members.side_effect = _api_error("channel_not_found")

        with pytest.raises(ChannelLookupError):
            resolver.resolve()
