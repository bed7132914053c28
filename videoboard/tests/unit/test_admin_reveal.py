"""Unit tests for the hidden admin link trigger."""

import pytest

from videoboard.app.core.config import settings
from videoboard.app.services.admin_reveal import AdminRevealTrigger


class TestAdminRevealTrigger:
    """Test the click-pattern trigger."""

    def test_five_quick_clicks_reveal(self):
        """Test five clicks within three seconds reveal the link."""
        trigger = AdminRevealTrigger()

        results = [trigger.register_click(now=t) for t in (0.0, 0.5, 1.0, 1.5, 2.0)]

        assert results == [False, False, False, False, True]
        assert trigger.revealed

    def test_slow_clicks_do_not_reveal(self):
        """Test clicks spread beyond the window never reveal."""
        trigger = AdminRevealTrigger()

        for t in (0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0):
            assert trigger.register_click(now=t) is False

    def test_old_clicks_expire(self):
        """Test only clicks inside the window count."""
        trigger = AdminRevealTrigger(required_clicks=3, window_seconds=1.0)

        trigger.register_click(now=0.0)
        trigger.register_click(now=0.5)
        assert trigger.register_click(now=2.0) is False
        assert trigger.register_click(now=2.2) is False
        assert trigger.register_click(now=2.4) is True

    def test_stays_revealed_until_reset(self):
        """Test the link stays visible until reset."""
        trigger = AdminRevealTrigger(required_clicks=2, window_seconds=1.0)
        trigger.register_click(now=0.0)
        trigger.register_click(now=0.1)

        assert trigger.register_click(now=100.0) is True

        trigger.reset()
        assert not trigger.revealed
        assert trigger.register_click(now=200.0) is False

    def test_from_settings(self, monkeypatch):
        """Test the trigger follows the configured click pattern."""
        monkeypatch.setattr(settings, "admin_reveal_clicks", 2)
        monkeypatch.setattr(settings, "admin_reveal_window_seconds", 0.5)

        trigger = AdminRevealTrigger.from_settings()

        assert (trigger.required_clicks, trigger.window_seconds) == (2, 0.5)
        assert trigger.register_click(now=0.0) is False
        assert trigger.register_click(now=0.4) is True

    @pytest.mark.parametrize("clicks,window", [(0, 3.0), (5, 0), (5, -1.0)])
    def test_invalid_arguments(self, clicks, window):
        """Test nonsensical trigger settings are rejected."""
        with pytest.raises(ValueError):
            AdminRevealTrigger(required_clicks=clicks, window_seconds=window)
