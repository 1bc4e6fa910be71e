"""Unit tests for settings validation."""

import pytest
from pydantic import ValidationError

from deck.config import DiscussionSettings, Settings


class TestDiscussionSettings:
    """Out-of-range discussion settings fail when settings load."""

    def test_defaults(self):
        settings = DiscussionSettings()

        assert settings.avatar_palette == ["blue", "green", "orange", "pink", "purple"]
        assert settings.recent_comments_limit == 2

    def test_empty_palette_rejected(self):
        with pytest.raises(ValidationError):
            DiscussionSettings(avatar_palette=[])

    @pytest.mark.parametrize("limit", [-1, 101])
    def test_recent_comments_limit_out_of_range(self, limit):
        with pytest.raises(ValidationError):
            DiscussionSettings(recent_comments_limit=limit)

    def test_recent_comments_limit_upper_bound_allowed(self):
        assert DiscussionSettings(recent_comments_limit=100).recent_comments_limit == 100

    def test_bad_value_from_environment(self, monkeypatch):
        monkeypatch.setenv("DISCUSSION__RECENT_COMMENTS_LIMIT", "500")

        with pytest.raises(ValidationError):
            Settings()
