"""
Hidden admin link trigger.

The public header reveals the admin login link after a quick series of
clicks on the logo. The server builds the trigger from settings and publishes
its parameters at `/api/admin/reveal-config`; the front end evaluates the
same predicate per click. This is a UI convenience only; authorization never
looks at it.
"""

from collections import deque
import time

from videoboard.app.core.config import settings


class AdminRevealTrigger:
    """Fires once ``required_clicks`` clicks land within ``window_seconds``."""

    def __init__(self, required_clicks: int = 5, window_seconds: float = 3.0):
        if required_clicks < 1:
            raise ValueError("required_clicks must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.required_clicks = required_clicks
        self.window_seconds = window_seconds
        self._clicks: deque[float] = deque()
        self.revealed = False

    @classmethod
    def from_settings(cls) -> "AdminRevealTrigger":
        """Trigger using the configured click count and window."""
        return cls(
            required_clicks=settings.admin_reveal_clicks,
            window_seconds=settings.admin_reveal_window_seconds,
        )

    def register_click(self, now: float | None = None) -> bool:
        """Record a click and return whether the link is (now) revealed."""
        if self.revealed:
            return True

        now = time.monotonic() if now is None else now
        self._clicks.append(now)
        while self._clicks and now - self._clicks[0] > self.window_seconds:
            self._clicks.popleft()

        if len(self._clicks) >= self.required_clicks:
            self.revealed = True
            self._clicks.clear()
        return self.revealed

    def reset(self) -> None:
        """Hide the link again and forget pending clicks."""
        self.revealed = False
        self._clicks.clear()
