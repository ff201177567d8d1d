"""Vertical scrolling of a settings page that is taller than its tab."""

from __future__ import annotations

from dataclasses import dataclass

LINE_STEP = 16
"""Pixels moved by one scroll-bar arrow click, before DPI scaling."""
PAGE_LINES = 5
"""Arrow steps in one page step."""
WHEEL_STEP = 64
"""Pixels moved by one mouse-wheel notch, before DPI scaling."""


@dataclass
class ScrollState:
    """Position of a vertical scroll bar.

    The methods that move the bar return how far the content has to move:
    positive moves it down (the view goes up), negative moves it up.
    """

    page: int = 0
    minimum: int = 0
    maximum: int = 0
    position: int = 0
    enabled: bool = False
    last_pos: int = 0

    def _store(self, position: int) -> None:
        # A scroll bar never lets its thumb run past the last full page.
        top = self.maximum - max(self.page - 1, 0)
        self.position = max(self.minimum, min(position, top))

    def set_info(self, page: int, maximum: int) -> None:
        """Set the visible height and the full height, and go back to the top."""
        self.page = page
        self.minimum = 0
        self.maximum = max(maximum, 0)
        self.position = self.minimum
        self.enabled = True

    def reset(self) -> int:
        """Scroll back to the top; returns the distance the content moves."""
        if not self.enabled:
            return 0
        step = self.position - self.minimum
        self.position = self.minimum
        return step

    def scroll(self, step: int) -> int:
        """Scroll by ``step`` (positive is up), clamped to the ends of the bar."""
        position = self.position - step
        if position < self.minimum:
            step = position + step - self.minimum
            position = self.minimum
        if position + self.page > self.maximum:
            step -= self.maximum - (position + self.page)
            if step > 0:
                step = 0
            position = self.maximum
        self._store(position)
        self.last_pos = self.position
        return step

    def thumb_track(self, position: int) -> int:
        """Follow the thumb dragged to ``position``."""
        amount = self.last_pos - position
        self.position = position
        self.last_pos = position
        return amount

    def is_bar_visible(self) -> bool:
        return self.page < self.maximum